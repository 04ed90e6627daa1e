import pytest

from apps.players import services


@pytest.fixture
def player_payload():
    return {
        "first_name": "Lionel",
        "last_name": "Messi",
        "jersey_number": 10,
        "position": "FW",
        "nationality": "Argentina",
        "date_of_birth": "1987-06-24",
        "height_cm": 170,
        "weight_kg": 72.5,
        "team_name": "Inter Miami",
        "league": "MLS",
        "goals": 12,
        "assists": 9,
        "yellow_cards": 1,
        "red_cards": 0,
    }


@pytest.fixture
def player_factory(db):
    def _create(first_name="Test", last_name="Player", **fields):
        created = services.create_player({"first_name": first_name, "last_name": last_name, **fields})
        return services.get_player(created["id"])

    return _create


@pytest.fixture
def player(player_factory, player_payload):
    return player_factory(**player_payload)


@pytest.fixture
def storage_down(monkeypatch):
    """Make every storage call fail the way an unreachable database does."""
    from django.db import OperationalError

    def _fail(*args, **kwargs):
        raise OperationalError("could not connect to server: Connection refused")

    monkeypatch.setattr("apps.players.db.fetch_all", _fail)
    monkeypatch.setattr("apps.players.db.execute", _fail)


@pytest.fixture
def storage_untouched(monkeypatch):
    def _fail(*args, **kwargs):
        pytest.fail("storage must not be reached")

    monkeypatch.setattr("apps.players.db.fetch_all", _fail)
    monkeypatch.setattr("apps.players.db.execute", _fail)
