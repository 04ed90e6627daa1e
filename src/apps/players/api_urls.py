from django.urls import path

from . import api

app_name = "players_api"

urlpatterns = [
    path("players", api.player_collection, name="collection"),
    path("players/<str:raw_id>", api.player_item, name="item"),
]
