from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Report:
    id: str | None = None
    title: str | None = None
    owner: str | None = None
    zone: int | None = None
    start: int | None = None
    end: int | None = None


@dataclass(frozen=True)
class Fight:
    """A single pull of a boss inside a report.

    ``start_time`` and ``end_time`` are milliseconds relative to the report start.
    """

    id: int | None = None
    start_time: int | None = None
    end_time: int | None = None
    boss: int | None = None
    size: int | None = None
    difficulty: int | None = None
    kill: bool | None = None
    partial: int | None = None
    standard_composition: bool | None = None
    boss_percentage: int | None = None
    fight_percentage: int | None = None
    last_phase_for_percentage_display: int | None = None
    name: str | None = None
    zone_id: int | None = None
    zone_name: str | None = None


@dataclass(frozen=True)
class ReportFights:
    """Fights and participants of a report.

    Actor and phase collections are kept as the raw JSON the API returns.
    """

    title: str | None = None
    owner: str | None = None
    start: int | None = None
    end: int | None = None
    zone: int | None = None
    lang: str | None = None
    fights: list[Fight] | None = None
    friendlies: list[dict[str, Any]] | None = None
    enemies: list[dict[str, Any]] | None = None
    friendly_pets: list[dict[str, Any]] | None = None
    enemy_pets: list[dict[str, Any]] | None = None
    phases: list[dict[str, Any]] | None = None


@dataclass(frozen=True)
class EventsPage:
    """Up to 300 events; ``next_page_timestamp`` is the ``start`` of the following page."""

    events: list[dict[str, Any]] | None = None
    next_page_timestamp: int | None = None
