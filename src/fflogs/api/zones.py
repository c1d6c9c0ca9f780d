import logging
from typing import Any

from fflogs.dispatcher import Dispatcher
from fflogs.domain.zone import Zone
from fflogs.mappers import zone_from_json

logger = logging.getLogger(__name__)


def zones(dispatcher: Dispatcher, **params: Any) -> list[Zone]:
    """Every zone (raid/dungeon instance) with its encounters and ranking brackets."""
    data = dispatcher.get("zones", params)
    result = [zone_from_json(entry) for entry in data]
    logger.debug("Fetched %d zones", len(result))
    return result
