from datetime import date
import pytest
from conftest import FakeResponse
from nfl_season import season_games, get_gameweeks
from nfl_season.gameids import FetchError, proper_jsonurl_formatting
from nfl_season.schema import SchemaError
from nfl_season.season_table import TABLE_COLUMNS, build_season_table


# Enumeration order deliberately not sorted by date
IDS_2015 = [
    "2015091000",  # wk 1 Thu
    "2015091301",  # wk 1 Sun
    "2015091700",  # wk 2 Thu
    "2015091300",  # wk 1 Sun
    "2015091400",  # wk 1 Mon
    "2015092000",  # wk 2 Sun
    "2015121300",  # wk 14
    "2016010300",  # wk 17
    "2016010900",  # wild card weekend, wk 18
]


def ids_for(ids):
    def source(season):
        return list(ids)
    return source


@pytest.fixture
def season_web(web):
    for i, gid in enumerate(IDS_2015):
        web.add_game(gid, home=f"H{i}", away=f"A{i}", home_score=[0, i, 2 * i], away_score=[i])
    return web


def test_first_week_only(season_web):
    table = build_season_table(2015, 1, id_source=ids_for(IDS_2015))
    assert table["GameID"].tolist() == ["2015091000", "2015091301", "2015091300", "2015091400"]
    assert len(season_web.calls) == 4


def test_week_filter_is_inclusive(season_web):
    table = build_season_table(2015, 17, id_source=ids_for(IDS_2015))
    assert table["GameID"].tolist() == IDS_2015[:-1]
    assert proper_jsonurl_formatting("2016010900") not in season_web.calls


def test_table_columns_and_values(season_web):
    table = season_games(2015, 2, id_source=ids_for(IDS_2015))
    assert list(table.columns) == TABLE_COLUMNS
    row = table.set_index("GameID").loc["2015091700"]
    assert row["date"] == date(2015, 9, 17)
    assert (row["home"], row["away"]) == ("H2", "A2")
    assert (row["homescore"], row["awayscore"]) == (4, 2)


def test_rows_follow_enumeration_order(season_web):
    table = season_games(2015, id_source=ids_for(IDS_2015))
    assert table["GameID"].tolist() == IDS_2015[:-1]
    assert not table["date"].is_monotonic_increasing


def test_custom_url_formatter_is_used(web):
    web.add_game("2015091000")
    web.routes["http://mirror.test/2015091000"] = web.routes.pop(proper_jsonurl_formatting("2015091000"))
    table = season_games(2015, id_source=ids_for(["2015091000"]),
                         url_formatter=lambda gid: f"http://mirror.test/{gid}")
    assert table["home"].tolist() == ["NE"]


def test_empty_enumeration_raises_lookup_error(web):
    with pytest.raises(LookupError):
        season_games(1900, id_source=ids_for([]))
    assert web.calls == []


def test_fetch_failure_aborts_whole_table(web):
    ids = [f"201509{d:02d}00" for d in range(10, 20)]
    for gid in ids:
        web.add_game(gid)
    web.add(proper_jsonurl_formatting(ids[4]), FakeResponse(status_code=500, text="boom"))

    with pytest.raises(FetchError):
        build_season_table(2015, 17, id_source=ids_for(ids))
    # Nothing after the failing game is requested
    assert len(web.calls) == 5


def test_schema_failure_aborts_whole_table(web):
    ids = ["2015091000", "2015091300"]
    web.add_game(ids[0])
    web.add(proper_jsonurl_formatting(ids[1]), FakeResponse({ids[1]: {"home": {"abbr": "NE"}}}))
    with pytest.raises(SchemaError):
        season_games(2015, id_source=ids_for(ids))


@pytest.mark.parametrize("weeks", [0, -3])
def test_max_week_below_one_rejected(web, weeks):
    with pytest.raises(ValueError):
        season_games(2015, weeks, id_source=ids_for(IDS_2015))
    assert web.calls == []


def test_get_gameweeks_matches_enumeration():
    weeks = get_gameweeks(2015, id_source=ids_for(IDS_2015))
    assert weeks == [1, 1, 2, 1, 1, 2, 14, 17, 18]


def test_get_gameweeks_empty_season():
    with pytest.raises(LookupError):
        get_gameweeks(2015, id_source=ids_for([]))
