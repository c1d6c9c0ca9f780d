import logging
from typing import Any

from fflogs.dispatcher import Dispatcher
from fflogs.domain.game_class import GameClass
from fflogs.mappers import game_class_from_json

logger = logging.getLogger(__name__)


def classes(dispatcher: Dispatcher, **params: Any) -> list[GameClass]:
    data = dispatcher.get("classes", params)
    result = [game_class_from_json(entry) for entry in data]
    logger.debug("Fetched %d classes", len(result))
    return result
