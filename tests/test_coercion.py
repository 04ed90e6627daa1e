import datetime

import pytest
from django.core.exceptions import ValidationError

from apps.players.coercion import (
    NAMES_REQUIRED,
    blank_to_none,
    coerce_player,
    player_to_form,
    to_count,
    to_date_or_none,
    to_int_or_none,
    to_number_or_none,
)


@pytest.mark.parametrize("value", [None, "", "   ", "\t\n"])
def test_blank_text_becomes_none(value):
    assert blank_to_none(value) is None


def test_text_is_trimmed():
    assert blank_to_none("  Brazil ") == "Brazil"


@pytest.mark.parametrize(
    "value, expected",
    [
        ("180", 180),
        (" 72.5 ", 72.5),
        (181.2, 181.2),
        ("", None),
        ("   ", None),
        ("abc", None),
        ("12abc", None),
        ("inf", None),
        ("nan", None),
        (float("nan"), None),
        ("1e400", None),
        ("1" + "0" * 400, None),
        (10**400, None),
        ("1_000", None),
        ("1e3", 1000.0),
        (True, None),
        (None, None),
    ],
)
def test_number_or_none(value, expected):
    assert to_number_or_none(value) == expected


def test_integer_fields_keep_only_integral_values():
    assert to_int_or_none("7") == 7
    assert to_int_or_none(9.0) == 9
    assert to_int_or_none("7.5") is None


def test_integer_fields_reject_values_past_column_range():
    assert to_int_or_none(str(2**31 - 1)) == 2**31 - 1
    assert to_int_or_none(str(-(2**31))) == -(2**31)
    assert to_int_or_none(str(2**31)) is None
    assert to_int_or_none(1e30) is None
    assert to_count("9" * 30) == 0


@pytest.mark.parametrize("value", [None, "", "  ", "lots", "2.5"])
def test_counters_default_to_zero(value):
    assert to_count(value) == 0


def test_counter_parses_text():
    assert to_count(" 4 ") == 4


def test_date_time_is_cut_to_date():
    assert to_date_or_none("2020-05-01T00:00:00.000Z") == datetime.date(2020, 5, 1)
    assert to_date_or_none("2020-05-01") == datetime.date(2020, 5, 1)
    assert to_date_or_none("") is None


def test_invalid_date_is_rejected():
    with pytest.raises(ValueError):
        to_date_or_none("01/05/2020")


@pytest.mark.parametrize(
    "data",
    [
        {"first_name": "Leo"},
        {"last_name": "Messi"},
        {"first_name": "", "last_name": "Messi"},
        {"first_name": "Leo", "last_name": "   "},
        {"first_name": None, "last_name": None},
    ],
)
def test_names_required(data):
    with pytest.raises(ValidationError) as excinfo:
        coerce_player(data)
    assert excinfo.value.messages == [NAMES_REQUIRED]


def test_form_text_coerced_to_storage_types():
    record = coerce_player(
        {
            "first_name": " Kylian ",
            "last_name": "Mbappe",
            "jersey_number": "9",
            "position": "",
            "nationality": "  ",
            "date_of_birth": "1998-12-20T00:00:00.000Z",
            "height_cm": "178",
            "weight_kg": "heavy",
            "team_name": "",
            "league": "La Liga",
            "goals": "",
            "assists": "3",
        }
    )
    assert record == {
        "first_name": "Kylian",
        "last_name": "Mbappe",
        "jersey_number": 9,
        "position": None,
        "nationality": None,
        "date_of_birth": datetime.date(1998, 12, 20),
        "height_cm": 178,
        "weight_kg": None,
        "team_name": None,
        "league": "La Liga",
        "goals": 0,
        "assists": 3,
        "yellow_cards": 0,
        "red_cards": 0,
    }


def test_unknown_position_and_bad_date_are_field_errors():
    with pytest.raises(ValidationError) as excinfo:
        coerce_player(
            {"first_name": "A", "last_name": "B", "position": "ST", "date_of_birth": "soon"}
        )
    assert set(excinfo.value.message_dict) == {"position", "date_of_birth"}


def test_player_to_form_reverses_storage_types():
    form = player_to_form(
        {
            "id": 3,
            "first_name": "Alexia",
            "last_name": "Putellas",
            "jersey_number": None,
            "position": "MF",
            "nationality": None,
            "date_of_birth": datetime.date(1994, 2, 4),
            "height_cm": 171.0,
            "weight_kg": 60.5,
            "team_name": None,
            "league": None,
            "goals": 5,
            "assists": None,
            "yellow_cards": 0,
            "red_cards": 0,
        }
    )
    assert form["jersey_number"] == ""
    assert form["position"] == "MF"
    assert form["nationality"] == ""
    assert form["date_of_birth"] == "1994-02-04"
    assert form["height_cm"] == "171"
    assert form["weight_kg"] == "60.5"
    assert form["goals"] == "5"
    assert form["assists"] == "0"
    assert "id" not in form


def test_player_to_form_cuts_datetime_strings():
    form = player_to_form(
        {"first_name": "A", "last_name": "B", "date_of_birth": "2020-04-30T17:00:00.000Z"}
    )
    assert form["date_of_birth"] == "2020-04-30"
    assert form["position"] == ""
