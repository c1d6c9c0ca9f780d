from dataclasses import dataclass


@dataclass(frozen=True)
class TeamMember:
    name: str | None = None
    character_class: int | None = None
    spec: int | None = None


@dataclass(frozen=True)
class EncounterRanking:
    """One character's or team's ranked result on an encounter.

    ``total`` is the DPS/HPS amount for individual rankings. ``duration`` is in
    milliseconds and ``start_time`` is a millisecond epoch timestamp. ``team``
    is only present for challenge mode rankings.
    """

    name: str | None = None
    total: float | None = None
    character_class: int | None = None
    spec: int | None = None
    guild: str | None = None
    server: str | None = None
    region: str | None = None
    duration: int | None = None
    start_time: int | None = None
    damage_taken: float | None = None
    deaths: int | None = None
    item_level: float | None = None
    patch: float | None = None
    report_id: str | None = None
    fight_id: int | None = None
    team: list[TeamMember] | None = None
    size: int | None = None


@dataclass(frozen=True)
class EncounterRankings:
    total: int | None = None
    rankings: list[EncounterRanking] | None = None


@dataclass(frozen=True)
class CharacterRanking:
    rank: int | None = None
    out_of: int | None = None
    total: float | None = None
    character_class: int | None = None
    spec: int | None = None
    guild: str | None = None
    duration: int | None = None
    start_time: int | None = None
    item_level: float | None = None
    patch: float | None = None
    report_id: str | None = None
    fight_id: int | None = None
    difficulty: int | None = None
    size: int | None = None
    estimate: bool | None = None
    encounter: int | None = None
