import logging
from typing import Any

from fflogs.dispatcher import Dispatcher, encode_component
from fflogs.domain.report import Report
from fflogs.mappers import report_from_json

logger = logging.getLogger(__name__)


def guild(
    dispatcher: Dispatcher,
    guild_name: str,
    server_name: str,
    server_region: str,
    **params: Any,
) -> list[Report]:
    """Calendar reports uploaded for a guild."""
    path = "reports/guild/{}/{}/{}".format(
        encode_component(guild_name),
        encode_component(server_name),
        encode_component(server_region),
    )
    data = dispatcher.get(path, params)
    result = [report_from_json(entry) for entry in data]
    logger.debug("Fetched %d reports for guild %s (%s/%s)", len(result), guild_name, server_name, server_region)
    return result


def user(dispatcher: Dispatcher, username: str, **params: Any) -> list[Report]:
    """Personal reports uploaded by a user."""
    data = dispatcher.get(f"reports/user/{encode_component(username)}", params)
    result = [report_from_json(entry) for entry in data]
    logger.debug("Fetched %d reports for user %s", len(result), username)
    return result
