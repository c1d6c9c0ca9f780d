"""Rankings endpoints.

Optional filters (metric, difficulty, partition, page, ...) are passed as
keyword arguments and forwarded verbatim as query parameters. See
https://www.fflogs.com/v1/docs/ for the accepted names.
"""

import logging
from typing import Any

from fflogs.dispatcher import Dispatcher, encode_component
from fflogs.domain.ranking import CharacterRanking, EncounterRankings
from fflogs.mappers import character_ranking_from_json, encounter_rankings_from_json

logger = logging.getLogger(__name__)


def encounter(dispatcher: Dispatcher, encounter_id: int | str, **params: Any) -> EncounterRankings:
    """Rankings for one encounter plus the total number of rankings matching the filters."""
    data = dispatcher.get(f"rankings/encounter/{encode_component(encounter_id)}", params)
    return encounter_rankings_from_json(data)


def character(
    dispatcher: Dispatcher,
    character_name: str,
    server_name: str,
    server_region: str,
    **params: Any,
) -> list[CharacterRanking]:
    """Every rank the character holds, one entry per fight.

    *server_region* is the short region name: NA, EU or JP.
    """
    path = "rankings/character/{}/{}/{}".format(
        encode_component(character_name),
        encode_component(server_name),
        encode_component(server_region),
    )
    data = dispatcher.get(path, params)
    result = [character_ranking_from_json(entry) for entry in data]
    logger.debug("Fetched %d rankings for %s (%s/%s)", len(result), character_name, server_name, server_region)
    return result
