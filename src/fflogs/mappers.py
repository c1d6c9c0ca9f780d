from collections.abc import Callable
from typing import Any, TypeVar

from fflogs.domain.game_class import GameClass, Spec
from fflogs.domain.parse import Parse, ParseData, ParseSpec
from fflogs.domain.ranking import CharacterRanking, EncounterRanking, EncounterRankings, TeamMember
from fflogs.domain.report import EventsPage, Fight, Report, ReportFights
from fflogs.domain.zone import Bracket, Encounter, Zone

T = TypeVar("T")


def map_list(mapper: Callable[[dict[str, Any]], T], items: list[dict[str, Any]] | None) -> list[T] | None:
    """Apply *mapper* to each item in order; a missing list stays ``None``."""
    if items is None:
        return None
    return [mapper(item) for item in items]


# -- Zones -------------------------------------------------------------------


def encounter_from_json(data: dict[str, Any]) -> Encounter:
    return Encounter(id=data.get("id"), name=data.get("name"))


def bracket_from_json(data: dict[str, Any]) -> Bracket:
    return Bracket(id=data.get("id"), name=data.get("name"))


def zone_from_json(data: dict[str, Any]) -> Zone:
    return Zone(
        id=data.get("id"),
        name=data.get("name"),
        frozen=data.get("frozen"),
        encounters=map_list(encounter_from_json, data.get("encounters")),
        brackets=map_list(bracket_from_json, data.get("brackets")),
    )


# -- Classes -----------------------------------------------------------------


def spec_from_json(data: dict[str, Any]) -> Spec:
    return Spec(id=data.get("id"), name=data.get("name"))


def game_class_from_json(data: dict[str, Any]) -> GameClass:
    return GameClass(
        id=data.get("id"),
        name=data.get("name"),
        specs=map_list(spec_from_json, data.get("specs")),
    )


# -- Rankings ----------------------------------------------------------------


def team_member_from_json(data: dict[str, Any]) -> TeamMember:
    return TeamMember(
        name=data.get("name"),
        character_class=data.get("class"),
        spec=data.get("spec"),
    )


def encounter_ranking_from_json(data: dict[str, Any]) -> EncounterRanking:
    return EncounterRanking(
        name=data.get("name"),
        total=data.get("total"),
        character_class=data.get("class"),
        spec=data.get("spec"),
        guild=data.get("guild"),
        server=data.get("server"),
        region=data.get("region"),
        duration=data.get("duration"),
        start_time=data.get("startTime"),
        damage_taken=data.get("damageTaken"),
        deaths=data.get("deaths"),
        item_level=data.get("itemLevel"),
        patch=data.get("patch"),
        report_id=data.get("reportID"),
        fight_id=data.get("fightID"),
        team=map_list(team_member_from_json, data.get("team")),
        size=data.get("size"),
    )


def encounter_rankings_from_json(data: dict[str, Any]) -> EncounterRankings:
    return EncounterRankings(
        total=data.get("total"),
        rankings=map_list(encounter_ranking_from_json, data.get("rankings")),
    )


def character_ranking_from_json(data: dict[str, Any]) -> CharacterRanking:
    return CharacterRanking(
        rank=data.get("rank"),
        out_of=data.get("outOf"),
        total=data.get("total"),
        character_class=data.get("class"),
        spec=data.get("spec"),
        guild=data.get("guild"),
        duration=data.get("duration"),
        start_time=data.get("startTime"),
        item_level=data.get("itemLevel"),
        patch=data.get("patch"),
        report_id=data.get("reportID"),
        fight_id=data.get("fightID"),
        difficulty=data.get("difficulty"),
        size=data.get("size"),
        estimate=data.get("estimate"),
        encounter=data.get("encounter"),
    )


# -- Parses ------------------------------------------------------------------


def parse_data_from_json(data: dict[str, Any]) -> ParseData:
    return ParseData(
        character_id=data.get("character_id"),
        character_name=data.get("character_name"),
        persecondamount=data.get("persecondamount"),
        ilvl=data.get("ilvl"),
        duration=data.get("duration"),
        start_time=data.get("start_time"),
        report_code=data.get("report_code"),
        report_fight=data.get("report_fight"),
        ranking_id=data.get("ranking_id"),
        guild=data.get("guild"),
        total=data.get("total"),
        rank=data.get("rank"),
        percent=data.get("percent"),
        exploit=data.get("exploit"),
        banned=data.get("banned"),
        historical_count=data.get("historical_count"),
        historical_percent=data.get("historical_percent"),
    )


def parse_spec_from_json(data: dict[str, Any]) -> ParseSpec:
    return ParseSpec(
        character_class=data.get("class"),
        spec=data.get("spec"),
        combined=data.get("combined"),
        data=map_list(parse_data_from_json, data.get("data")),
        best_persecondamount=data.get("best_persecondamount"),
        best_duration=data.get("best_duration"),
        best_historical_percent=data.get("best_historical_percent"),
        best_allstar_points=data.get("best_allstar_points"),
        best_combined_allstar_points=data.get("best_combined_allstar_points"),
        possible_allstar_points=data.get("possible_allstar_points"),
        historical_total=data.get("historical_total"),
        historical_median=data.get("historical_median"),
        historical_avg=data.get("historical_avg"),
    )


def parse_from_json(data: dict[str, Any]) -> Parse:
    return Parse(
        difficulty=data.get("difficulty"),
        size=data.get("size"),
        kill=data.get("kill"),
        name=data.get("name"),
        specs=map_list(parse_spec_from_json, data.get("specs")),
    )


# -- Reports -----------------------------------------------------------------


def report_from_json(data: dict[str, Any]) -> Report:
    return Report(
        id=data.get("id"),
        title=data.get("title"),
        owner=data.get("owner"),
        zone=data.get("zone"),
        start=data.get("start"),
        end=data.get("end"),
    )


def fight_from_json(data: dict[str, Any]) -> Fight:
    return Fight(
        id=data.get("id"),
        start_time=data.get("start_time"),
        end_time=data.get("end_time"),
        boss=data.get("boss"),
        size=data.get("size"),
        difficulty=data.get("difficulty"),
        kill=data.get("kill"),
        partial=data.get("partial"),
        standard_composition=data.get("standardComposition"),
        boss_percentage=data.get("bossPercentage"),
        fight_percentage=data.get("fightPercentage"),
        last_phase_for_percentage_display=data.get("lastPhaseForPercentageDisplay"),
        name=data.get("name"),
        zone_id=data.get("zoneID"),
        zone_name=data.get("zoneName"),
    )


def report_fights_from_json(data: dict[str, Any]) -> ReportFights:
    return ReportFights(
        title=data.get("title"),
        owner=data.get("owner"),
        start=data.get("start"),
        end=data.get("end"),
        zone=data.get("zone"),
        lang=data.get("lang"),
        fights=map_list(fight_from_json, data.get("fights")),
        friendlies=data.get("friendlies"),
        enemies=data.get("enemies"),
        friendly_pets=data.get("friendlyPets"),
        enemy_pets=data.get("enemyPets"),
        phases=data.get("phases"),
    )


def events_page_from_json(data: dict[str, Any]) -> EventsPage:
    return EventsPage(
        events=data.get("events"),
        next_page_timestamp=data.get("nextPageTimestamp"),
    )
