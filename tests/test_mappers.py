from dataclasses import fields
from typing import Any

from fflogs.domain.parse import ParseData
from fflogs.domain.ranking import CharacterRanking, EncounterRanking
from fflogs.domain.zone import Zone
from fflogs.mappers import (
    character_ranking_from_json,
    encounter_ranking_from_json,
    encounter_rankings_from_json,
    events_page_from_json,
    fight_from_json,
    game_class_from_json,
    map_list,
    parse_data_from_json,
    parse_from_json,
    report_fights_from_json,
    report_from_json,
    zone_from_json,
)


def _zone_json(encounters: int, brackets: int) -> dict[str, Any]:
    return {
        "id": 17,
        "name": "Eden's Promise",
        "frozen": False,
        "encounters": [{"id": 73 + i, "name": f"Boss {i}"} for i in range(encounters)],
        "brackets": [{"id": 5.0 + i / 10, "name": f"Patch 5.{i}"} for i in range(brackets)],
    }


class TestMapList:
    def test_none_stays_none(self) -> None:
        assert map_list(report_from_json, None) is None

    def test_empty_list_stays_empty(self) -> None:
        assert map_list(report_from_json, []) == []

    def test_preserves_order(self) -> None:
        result = map_list(report_from_json, [{"id": "b"}, {"id": "a"}, {"id": "c"}])
        assert result is not None
        assert [r.id for r in result] == ["b", "a", "c"]


class TestZoneFromJson:
    def test_copies_scalar_fields(self) -> None:
        zone = zone_from_json(_zone_json(1, 1))
        assert zone.id == 17
        assert zone.name == "Eden's Promise"
        assert zone.frozen is False

    def test_nested_collections_keep_count_and_order(self) -> None:
        zone = zone_from_json(_zone_json(4, 3))
        assert zone.encounters is not None
        assert zone.brackets is not None
        assert [e.id for e in zone.encounters] == [73, 74, 75, 76]
        assert [e.name for e in zone.encounters] == ["Boss 0", "Boss 1", "Boss 2", "Boss 3"]
        assert [b.name for b in zone.brackets] == ["Patch 5.0", "Patch 5.1", "Patch 5.2"]

    def test_missing_fields_are_none(self) -> None:
        zone = zone_from_json({})
        assert zone == Zone()
        assert zone.encounters is None
        assert zone.brackets is None

    def test_empty_collections_stay_empty(self) -> None:
        zone = zone_from_json(_zone_json(0, 0))
        assert zone.encounters == []
        assert zone.brackets == []


class TestGameClassFromJson:
    def test_maps_specs(self) -> None:
        game_class = game_class_from_json(
            {"id": 1, "name": "Global", "specs": [{"id": 1, "name": "Astrologian"}, {"id": 2, "name": "Bard"}]}
        )
        assert game_class.id == 1
        assert game_class.specs is not None
        assert [s.name for s in game_class.specs] == ["Astrologian", "Bard"]

    def test_missing_specs_is_none(self) -> None:
        assert game_class_from_json({"id": 1}).specs is None


class TestEncounterRankingFromJson:
    _RANKING = {
        "name": "Rin Hoshizora",
        "total": 12345.6,
        "class": 1,
        "spec": 3,
        "guild": "Wild Hearts",
        "server": "Exodus",
        "region": "NA",
        "duration": 512000,
        "startTime": 1580000000000,
        "damageTaken": 400000,
        "deaths": 0,
        "itemLevel": 475,
        "patch": 5.2,
        "reportID": "aBcD1234",
        "fightID": 7,
        "size": 8,
    }

    def test_copies_every_field(self) -> None:
        ranking = encounter_ranking_from_json(self._RANKING)
        assert ranking == EncounterRanking(
            name="Rin Hoshizora",
            total=12345.6,
            character_class=1,
            spec=3,
            guild="Wild Hearts",
            server="Exodus",
            region="NA",
            duration=512000,
            start_time=1580000000000,
            damage_taken=400000,
            deaths=0,
            item_level=475,
            patch=5.2,
            report_id="aBcD1234",
            fight_id=7,
            team=None,
            size=8,
        )

    def test_team_members(self) -> None:
        ranking = encounter_ranking_from_json(
            {"team": [{"name": "A", "class": 1, "spec": 2}, {"name": "B", "class": 1, "spec": 5}]}
        )
        assert ranking.team is not None
        assert [(m.name, m.character_class, m.spec) for m in ranking.team] == [("A", 1, 2), ("B", 1, 5)]

    def test_absent_team_is_none(self) -> None:
        assert encounter_ranking_from_json(self._RANKING).team is None

    def test_type_mismatch_passes_through(self) -> None:
        ranking = encounter_ranking_from_json({"total": "not a number", "deaths": "3"})
        assert ranking.total == "not a number"
        assert ranking.deaths == "3"


class TestEncounterRankingsFromJson:
    def test_total_and_rankings(self) -> None:
        result = encounter_rankings_from_json({"total": 2, "rankings": [{"name": "A"}, {"name": "B"}]})
        assert result.total == 2
        assert result.rankings is not None
        assert [r.name for r in result.rankings] == ["A", "B"]


class TestCharacterRankingFromJson:
    def test_report_id_and_patch_are_populated(self) -> None:
        ranking = character_ranking_from_json({"reportID": "xYz987", "patch": 5.3})
        assert ranking.report_id == "xYz987"
        assert ranking.patch == 5.3

    def test_copies_camel_case_fields(self) -> None:
        ranking = character_ranking_from_json(
            {
                "rank": 10,
                "outOf": 5000,
                "total": 9876.5,
                "class": 1,
                "spec": 4,
                "guild": "Wild Hearts",
                "duration": 400000,
                "startTime": 1580000000000,
                "itemLevel": 480,
                "fightID": 3,
                "difficulty": 101,
                "size": 8,
                "estimate": False,
                "encounter": 73,
            }
        )
        assert ranking.out_of == 5000
        assert ranking.start_time == 1580000000000
        assert ranking.item_level == 480
        assert ranking.fight_id == 3
        assert ranking.estimate is False
        assert ranking.encounter == 73

    def test_empty_object_leaves_every_field_none(self) -> None:
        ranking = character_ranking_from_json({})
        assert all(getattr(ranking, f.name) is None for f in fields(CharacterRanking))


class TestParseFromJson:
    _PARSE = {
        "difficulty": 101,
        "size": 8,
        "kill": 3,
        "name": "Eden Prime",
        "specs": [
            {
                "class": "Global",
                "spec": "Dancer",
                "combined": False,
                "best_persecondamount": 12000.5,
                "best_duration": 420000,
                "best_historical_percent": 98.7,
                "best_allstar_points": 120,
                "best_combined_allstar_points": 120,
                "possible_allstar_points": 120,
                "historical_total": 3,
                "historical_median": 80.1,
                "historical_avg": 82.4,
                "data": [
                    {
                        "character_id": 1,
                        "character_name": "Rin Hoshizora",
                        "persecondamount": 12000.5,
                        "ilvl": 475,
                        "duration": 420000,
                        "start_time": 1580000000000,
                        "report_code": "aBcD1234",
                        "report_fight": 2,
                        "ranking_id": 99,
                        "guild": "Wild Hearts",
                        "total": 5000000,
                        "rank": "123",
                        "percent": 98.7,
                        "exploit": 0,
                        "banned": False,
                        "historical_count": 10000,
                        "historical_percent": 97.5,
                    }
                ],
            }
        ],
    }

    def test_nested_specs_and_data(self) -> None:
        parse = parse_from_json(self._PARSE)
        assert parse.name == "Eden Prime"
        assert parse.kill == 3
        assert parse.specs is not None
        spec = parse.specs[0]
        assert spec.character_class == "Global"
        assert spec.spec == "Dancer"
        assert spec.historical_avg == 82.4
        assert spec.data is not None
        assert spec.data[0].character_name == "Rin Hoshizora"

    def test_parse_data_round_trip(self) -> None:
        raw = self._PARSE["specs"][0]["data"][0]  # type: ignore[index]
        data = parse_data_from_json(raw)
        assert {f.name: getattr(data, f.name) for f in fields(ParseData)} == raw

    def test_missing_specs_is_none(self) -> None:
        assert parse_from_json({"name": "x"}).specs is None


class TestReportFromJson:
    def test_copies_fields(self) -> None:
        report = report_from_json(
            {"id": "aBcD1234", "title": "Raid", "owner": "wesleylucas", "zone": 29, "start": 1, "end": 2}
        )
        assert (report.id, report.title, report.owner, report.zone, report.start, report.end) == (
            "aBcD1234",
            "Raid",
            "wesleylucas",
            29,
            1,
            2,
        )


class TestReportFightsFromJson:
    def test_fights_are_typed_and_actors_raw(self) -> None:
        friendlies = [{"name": "Rin Hoshizora", "id": 1, "type": "Dancer", "fights": [{"id": 1}]}]
        result = report_fights_from_json(
            {
                "title": "Raid",
                "lang": "en",
                "fights": [
                    {
                        "id": 1,
                        "start_time": 0,
                        "end_time": 500000,
                        "boss": 73,
                        "size": 8,
                        "difficulty": 101,
                        "kill": True,
                        "standardComposition": True,
                        "bossPercentage": 0,
                        "fightPercentage": 0,
                        "lastPhaseForPercentageDisplay": 4,
                        "name": "Eden Prime",
                        "zoneID": 29,
                        "zoneName": "Eden's Gate",
                    }
                ],
                "friendlies": friendlies,
            }
        )
        assert result.lang == "en"
        assert result.fights is not None
        fight = result.fights[0]
        assert fight.kill is True
        assert fight.standard_composition is True
        assert fight.last_phase_for_percentage_display == 4
        assert fight.zone_id == 29
        assert fight.zone_name == "Eden's Gate"
        assert result.friendlies == friendlies
        assert result.enemies is None

    def test_fight_partial_absent(self) -> None:
        assert fight_from_json({"id": 1}).partial is None


class TestEventsPageFromJson:
    def test_cursor_present(self) -> None:
        page = events_page_from_json({"events": [{"type": "cast"}], "nextPageTimestamp": 9000})
        assert page.events == [{"type": "cast"}]
        assert page.next_page_timestamp == 9000

    def test_cursor_absent(self) -> None:
        assert events_page_from_json({"events": []}).next_page_timestamp is None
