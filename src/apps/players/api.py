"""
JSON endpoints for the players resource.

    GET    /api/players         list
    POST   /api/players         create
    GET    /api/players/<id>    get
    PUT    /api/players/<id>    update
    DELETE /api/players/<id>    delete
"""
import json
import logging

from django.core.exceptions import ValidationError
from django.db import DatabaseError
from django.http import JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_http_methods

from . import services
from .services import PlayerNotFound

logger = logging.getLogger(__name__)


class InvalidBody(Exception):
    pass


def _read_json(request) -> dict:
    try:
        body = json.loads(request.body or b"{}")
    except (ValueError, UnicodeDecodeError) as exc:
        raise InvalidBody(f"Invalid JSON body: {exc}") from exc
    if not isinstance(body, dict):
        raise InvalidBody("Request body must be a JSON object")
    return body


def _error(message: str, status: int, error=None) -> JsonResponse:
    payload = {"message": message}
    if error is not None:
        payload["error"] = str(error)
    return JsonResponse(payload, status=status)


def _validation_text(exc: ValidationError) -> str:
    return " ".join(exc.messages)


@csrf_exempt
@require_http_methods(["GET", "POST"])
def player_collection(request):
    if request.method == "POST":
        return _create(request)
    try:
        players = services.list_players()
    except DatabaseError as exc:
        logger.exception("Listing players failed")
        return _error("error", 500, exc)
    return JsonResponse(players, safe=False)


def _create(request):
    try:
        body = _read_json(request)
        created = services.create_player(body)
    except InvalidBody as exc:
        return _error("error", 400, exc)
    except ValidationError as exc:
        return _error("error", 400, _validation_text(exc))
    except DatabaseError as exc:
        logger.exception("Creating player failed")
        return _error("error", 500, exc)
    logger.info("Created player id=%s", created["id"])
    return JsonResponse({"message": "success", "data": created}, status=201)


@csrf_exempt
@require_http_methods(["GET", "PUT", "DELETE"])
def player_item(request, raw_id: str):
    try:
        player_id = services.parse_player_id(raw_id)
    except ValidationError:
        return _error("Invalid id", 400)

    try:
        if request.method == "PUT":
            services.update_player(player_id, _read_json(request))
            logger.info("Updated player id=%s", player_id)
            return JsonResponse({"message": "Update success"})
        if request.method == "DELETE":
            services.delete_player(player_id)
            logger.info("Deleted player id=%s", player_id)
            return JsonResponse({"message": "Delete success"})
        return JsonResponse(services.get_player(player_id))
    except InvalidBody as exc:
        return _error(str(exc), 400)
    except ValidationError as exc:
        return _error(_validation_text(exc), 400)
    except PlayerNotFound:
        return _error("Player not found", 404)
    except DatabaseError as exc:
        logger.exception("%s player id=%s failed", request.method, player_id)
        return _error("Server error", 500, exc)
