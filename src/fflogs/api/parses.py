import logging
from typing import Any

from fflogs.dispatcher import Dispatcher, encode_component
from fflogs.domain.parse import Parse
from fflogs.mappers import parse_from_json

logger = logging.getLogger(__name__)


def character(
    dispatcher: Dispatcher,
    character_name: str,
    server_name: str,
    server_region: str,
    **params: Any,
) -> list[Parse]:
    """All parses for a character across every spec, not only the ranked ones."""
    path = "parses/character/{}/{}/{}".format(
        encode_component(character_name),
        encode_component(server_name),
        encode_component(server_region),
    )
    data = dispatcher.get(path, params)
    result = [parse_from_json(entry) for entry in data]
    logger.debug("Fetched %d parses for %s (%s/%s)", len(result), character_name, server_name, server_region)
    return result
