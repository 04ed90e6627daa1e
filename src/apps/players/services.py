from typing import Any, Mapping

from django.core.exceptions import ValidationError
from django.db import DatabaseError

from . import db
from .coercion import WRITABLE_FIELDS, coerce_player


class PlayerNotFound(Exception):
    def __init__(self, player_id: int):
        super().__init__("Player not found")
        self.player_id = player_id


class PlayerStorageError(DatabaseError):
    pass


_COLUMNS = ",\n    ".join(WRITABLE_FIELDS)
_PLACEHOLDERS = ", ".join(["%s"] * len(WRITABLE_FIELDS))
_ASSIGNMENTS = ",\n    ".join(f"{field} = %s" for field in WRITABLE_FIELDS)

LIST_SQL = "SELECT * FROM players ORDER BY id ASC"
GET_SQL = "SELECT * FROM players WHERE id = %s"
INSERT_SQL = f"""
INSERT INTO players (
    {_COLUMNS},
    created_at,
    updated_at
)
VALUES ({_PLACEHOLDERS}, CURRENT_TIMESTAMP, CURRENT_TIMESTAMP)
"""
UPDATE_SQL = f"""
UPDATE players SET
    {_ASSIGNMENTS},
    updated_at = CURRENT_TIMESTAMP
WHERE id = %s
"""
DELETE_SQL = "DELETE FROM players WHERE id = %s"

# Upper bound of the bigint primary key.
MAX_PLAYER_ID = 9223372036854775807


def parse_player_id(raw: Any) -> int:
    text = str(raw).strip()
    if not text.isascii() or not text.isdigit():
        raise ValidationError("Invalid id", code="invalid_id")
    try:
        player_id = int(text)
    except ValueError:
        # more digits than int() will convert
        raise ValidationError("Invalid id", code="invalid_id")
    if player_id <= 0:
        raise ValidationError("Invalid id", code="invalid_id")
    return player_id


def _ensure_storable(player_id: int) -> None:
    """Ids past the id column range cannot exist; answer without a query."""
    if player_id > MAX_PLAYER_ID:
        raise PlayerNotFound(player_id)


def _values(record: Mapping[str, Any]) -> list[Any]:
    return [record[field] for field in WRITABLE_FIELDS]


def list_players() -> list[dict[str, Any]]:
    return db.fetch_all(LIST_SQL)


def get_player(player_id: int) -> dict[str, Any]:
    _ensure_storable(player_id)
    rows = db.fetch_all(GET_SQL, [player_id])
    if not rows:
        raise PlayerNotFound(player_id)
    return rows[0]


def create_player(data: Mapping[str, Any]) -> dict[str, Any]:
    """Insert a player; returns the new id with the echoed names."""
    record = coerce_player(data)
    result = db.execute(INSERT_SQL, _values(record), returning="id")
    if result.last_insert_id is None:
        raise PlayerStorageError("Insert failed")
    return {
        "id": result.last_insert_id,
        "first_name": record["first_name"],
        "last_name": record["last_name"],
    }


def update_player(player_id: int, data: Mapping[str, Any]) -> None:
    """Overwrite every writable column of an existing player."""
    record = coerce_player(data)
    _ensure_storable(player_id)
    result = db.execute(UPDATE_SQL, [*_values(record), player_id])
    if result.affected_rows == 0:
        raise PlayerNotFound(player_id)


def delete_player(player_id: int) -> None:
    _ensure_storable(player_id)
    result = db.execute(DELETE_SQL, [player_id])
    if result.affected_rows == 0:
        raise PlayerNotFound(player_id)
