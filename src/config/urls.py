from django.urls import include, path
from django.views.generic import RedirectView

urlpatterns = [
    path("", RedirectView.as_view(pattern_name="players:list", permanent=False), name="home"),
    path("api/", include("apps.players.api_urls")),
    path("players/", include("apps.players.urls")),
]
