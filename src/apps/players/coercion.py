"""
Conversion between wire values (form text or decoded JSON) and the typed
values stored in the ``players`` table.

``coerce_player`` is the forward direction, ``player_to_form`` the reverse.
Both are pure; callers never coerce fields inline.

Optional fields come out as ``None``, never as the empty string. Malformed
numbers are not an error: they become ``None`` (or ``0`` for the statistic
counters).
"""
import datetime
import math
from typing import Any, Mapping

from django.core.exceptions import ValidationError
from django.utils.dateparse import parse_date

from .models import Player

NAME_FIELDS = ("first_name", "last_name")
TEXT_FIELDS = ("nationality", "team_name", "league")
NUMBER_FIELDS = ("height_cm", "weight_kg")
COUNTER_FIELDS = ("goals", "assists", "yellow_cards", "red_cards")

# Column order used by the INSERT and UPDATE statements.
WRITABLE_FIELDS = (
    "first_name",
    "last_name",
    "jersey_number",
    "position",
    "nationality",
    "date_of_birth",
    "height_cm",
    "weight_kg",
    "team_name",
    "league",
    "goals",
    "assists",
    "yellow_cards",
    "red_cards",
)

NAMES_REQUIRED = "first_name and last_name are required"

# jersey_number and the counters are 4-byte integer columns.
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


def blank_to_none(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _is_finite(number: int | float) -> bool:
    try:
        return math.isfinite(float(number))
    except OverflowError:
        return False


def to_number_or_none(value: Any) -> int | float | None:
    """Parse a number, returning ``None`` for anything unparseable or non-finite.

    Finiteness is judged on the float value, so an integer literal too large
    for a double counts as non-finite just like ``"1e400"``.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return value if _is_finite(value) else None
    text = str(value).strip()
    # digit separators ("1_000") do not parse
    if not text or "_" in text:
        return None
    try:
        number = float(text)
    except ValueError:
        return None
    if not math.isfinite(number):
        return None
    try:
        return int(text)
    except ValueError:
        return number


def to_int_or_none(value: Any) -> int | None:
    """Like ``to_number_or_none`` but for integer columns.

    Non-integral values and values outside the 32-bit integer column range
    count as unparseable.
    """
    number = to_number_or_none(value)
    if number is None:
        return None
    if isinstance(number, float):
        if not number.is_integer():
            return None
        number = int(number)
    if not INT_MIN <= number <= INT_MAX:
        return None
    return number


def to_count(value: Any) -> int:
    number = to_int_or_none(value)
    return 0 if number is None else number


def date_only(value: str) -> str:
    """Cut a combined date-time string down to its date part."""
    return value.split("T", 1)[0] if "T" in value else value


def to_date_or_none(value: Any) -> datetime.date | None:
    if value is None:
        return None
    if isinstance(value, datetime.datetime):
        return value.date()
    if isinstance(value, datetime.date):
        return value
    text = str(value).strip()
    if not text:
        return None
    parsed = parse_date(date_only(text))
    if parsed is None:
        raise ValueError(f"{text!r} is not a YYYY-MM-DD date")
    return parsed


def to_position_or_none(value: Any) -> str | None:
    code = blank_to_none(value)
    if code is None:
        return None
    if code not in Player.Position.values:
        raise ValueError(f"{code!r} is not one of {', '.join(Player.Position.values)}")
    return code


def coerce_player(data: Mapping[str, Any]) -> dict[str, Any]:
    """Map raw field values to a typed record ready for storage.

    Raises ``ValidationError`` when a name is missing or empty, or when the
    date or position cannot be stored at all.
    """
    first_name = blank_to_none(data.get("first_name"))
    last_name = blank_to_none(data.get("last_name"))
    if not first_name or not last_name:
        raise ValidationError(NAMES_REQUIRED, code="required")

    record: dict[str, Any] = {"first_name": first_name, "last_name": last_name}
    errors: dict[str, str] = {}

    record["jersey_number"] = to_int_or_none(data.get("jersey_number"))
    try:
        record["position"] = to_position_or_none(data.get("position"))
    except ValueError as exc:
        errors["position"] = str(exc)
    for field in TEXT_FIELDS:
        record[field] = blank_to_none(data.get(field))
    try:
        record["date_of_birth"] = to_date_or_none(data.get("date_of_birth"))
    except ValueError as exc:
        errors["date_of_birth"] = str(exc)
    for field in NUMBER_FIELDS:
        record[field] = to_number_or_none(data.get(field))
    for field in COUNTER_FIELDS:
        record[field] = to_count(data.get(field))

    if errors:
        raise ValidationError(errors, code="invalid")
    return {field: record[field] for field in WRITABLE_FIELDS}


def _display(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def player_to_form(player: Mapping[str, Any]) -> dict[str, str]:
    """Map a stored row back to the text shown in form inputs."""
    form = {field: _display(player.get(field)) for field in WRITABLE_FIELDS}
    dob = player.get("date_of_birth")
    if isinstance(dob, (datetime.date, datetime.datetime)):
        form["date_of_birth"] = dob.isoformat()
    form["date_of_birth"] = date_only(form["date_of_birth"])
    for field in COUNTER_FIELDS:
        form[field] = _display(player.get(field) or 0)
    return form
