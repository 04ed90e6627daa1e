import pytest
from django.db import DatabaseError

from apps.players import db


def _insert(first_name, last_name):
    return db.execute(
        "INSERT INTO players (first_name, last_name, goals, assists, yellow_cards, red_cards, "
        "created_at, updated_at) VALUES (%s, %s, 0, 0, 0, 0, CURRENT_TIMESTAMP, CURRENT_TIMESTAMP)",
        [first_name, last_name],
        returning="id",
    )


@pytest.mark.django_db
def test_insert_returns_generated_id():
    first = _insert("Andrea", "Pirlo")
    second = _insert("Gianluigi", "Buffon")
    assert first.affected_rows == 1
    assert isinstance(first.last_insert_id, int)
    assert second.last_insert_id > first.last_insert_id


@pytest.mark.django_db
def test_fetch_all_returns_rows_as_dicts_in_order():
    _insert("Andrea", "Pirlo")
    _insert("Gianluigi", "Buffon")
    rows = db.fetch_all("SELECT id, first_name, last_name FROM players ORDER BY id ASC")
    assert [row["last_name"] for row in rows] == ["Pirlo", "Buffon"]
    assert set(rows[0]) == {"id", "first_name", "last_name"}


@pytest.mark.django_db
def test_fetch_all_empty():
    assert db.fetch_all("SELECT * FROM players WHERE id = %s", [1]) == []


@pytest.mark.django_db
def test_execute_reports_affected_rows():
    created = _insert("Andrea", "Pirlo")
    result = db.execute("DELETE FROM players WHERE id = %s", [created.last_insert_id])
    assert result.affected_rows == 1
    assert result.last_insert_id is None
    again = db.execute("DELETE FROM players WHERE id = %s", [created.last_insert_id])
    assert again.affected_rows == 0


@pytest.mark.django_db
def test_statement_errors_propagate():
    with pytest.raises(DatabaseError):
        db.fetch_all("SELECT * FROM no_such_table")
