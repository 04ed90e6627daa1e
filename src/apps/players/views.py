import logging

from django.contrib import messages
from django.core.exceptions import ValidationError
from django.db import DatabaseError
from django.http import Http404
from django.shortcuts import redirect, render
from django.views.decorators.http import require_http_methods

from . import services
from .coercion import player_to_form
from .forms import PlayerForm
from .services import PlayerNotFound

logger = logging.getLogger(__name__)


def _load_player(pk: int) -> dict:
    try:
        return services.get_player(services.parse_player_id(pk))
    except (ValidationError, PlayerNotFound):
        raise Http404("Player not found")


def _table_context():
    try:
        return {"players": services.list_players(), "load_error": None}
    except DatabaseError as exc:
        logger.exception("Listing players failed")
        return {"players": [], "load_error": str(exc)}


def player_list(request):
    return render(request, "players/player_list.html", _table_context())


def player_detail(request, pk: int):
    player = _load_player(pk)
    return render(request, "players/player_detail.html", {"player": player})


def player_create(request):
    if request.method == "POST":
        form = PlayerForm(request.POST)
        if form.is_valid():
            try:
                created = services.create_player(form.record)
            except DatabaseError as exc:
                logger.exception("Creating player failed")
                messages.error(request, str(exc))
            else:
                messages.success(
                    request, f"Player {created['first_name']} {created['last_name']} created."
                )
                return redirect("players:list")
    else:
        form = PlayerForm()

    return render(request, "players/player_form.html", {"form": form, "is_edit": False})


def player_edit(request, pk: int):
    player = _load_player(pk)
    if request.method == "POST":
        form = PlayerForm(request.POST)
        if form.is_valid():
            try:
                services.update_player(player["id"], form.record)
            except PlayerNotFound:
                raise Http404("Player not found")
            except DatabaseError as exc:
                logger.exception("Updating player id=%s failed", player["id"])
                messages.error(request, str(exc))
            else:
                messages.success(request, "Player updated.")
                return redirect("players:list")
    else:
        form = PlayerForm(initial=player_to_form(player))

    return render(
        request,
        "players/player_form.html",
        {"form": form, "is_edit": True, "player": player},
    )


@require_http_methods(["GET", "POST"])
def player_delete(request, pk: int):
    if request.method == "GET":
        player = _load_player(pk)
        return render(request, "players/player_confirm_delete.html", {"player": player})

    try:
        services.delete_player(services.parse_player_id(pk))
    except (ValidationError, PlayerNotFound):
        messages.error(request, "Player not found")
    except DatabaseError as exc:
        logger.exception("Deleting player id=%s failed", pk)
        messages.error(request, str(exc))
    else:
        messages.success(request, "Player deleted.")

    if request.htmx:
        return render(request, "players/_player_table.html", _table_context())
    return redirect("players:list")
