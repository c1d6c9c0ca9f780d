from dataclasses import dataclass


@dataclass(frozen=True)
class ParseData:
    character_id: int | None = None
    character_name: str | None = None
    persecondamount: float | None = None
    ilvl: float | None = None
    duration: int | None = None
    start_time: int | None = None
    report_code: str | None = None
    report_fight: int | None = None
    ranking_id: int | None = None
    guild: str | None = None
    total: float | None = None
    rank: str | None = None
    percent: float | None = None
    exploit: int | None = None
    banned: bool | None = None
    historical_count: int | None = None
    historical_percent: float | None = None


@dataclass(frozen=True)
class ParseSpec:
    character_class: str | None = None
    spec: str | None = None
    combined: bool | None = None
    data: list[ParseData] | None = None
    best_persecondamount: float | None = None
    best_duration: int | None = None
    best_historical_percent: float | None = None
    best_allstar_points: float | None = None
    best_combined_allstar_points: float | None = None
    possible_allstar_points: float | None = None
    historical_total: int | None = None
    historical_median: float | None = None
    historical_avg: float | None = None


@dataclass(frozen=True)
class Parse:
    """Every recorded parse of a character on one encounter, grouped by spec."""

    difficulty: int | None = None
    size: int | None = None
    kill: int | None = None
    name: str | None = None
    specs: list[ParseSpec] | None = None
