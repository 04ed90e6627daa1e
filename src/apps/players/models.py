from django.db import models


class Player(models.Model):
    """Schema for the ``players`` table.

    Reads and writes at runtime go through :mod:`apps.players.db` with
    hand-written SQL; the model only owns the table definition.
    """

    class Position(models.TextChoices):
        GK = "GK", "Goalkeeper"
        DF = "DF", "Defender"
        MF = "MF", "Midfielder"
        FW = "FW", "Forward"

    first_name = models.CharField(max_length=100)
    last_name = models.CharField(max_length=100)
    jersey_number = models.IntegerField(null=True, blank=True)
    position = models.CharField(max_length=2, choices=Position.choices, null=True, blank=True)
    nationality = models.CharField(max_length=100, null=True, blank=True)
    date_of_birth = models.DateField(null=True, blank=True)
    height_cm = models.FloatField(null=True, blank=True)
    weight_kg = models.FloatField(null=True, blank=True)
    team_name = models.CharField(max_length=150, null=True, blank=True)
    league = models.CharField(max_length=150, null=True, blank=True)
    goals = models.PositiveIntegerField(default=0)
    assists = models.PositiveIntegerField(default=0)
    yellow_cards = models.PositiveIntegerField(default=0)
    red_cards = models.PositiveIntegerField(default=0)
    created_at = models.DateTimeField()
    updated_at = models.DateTimeField()

    class Meta:
        db_table = "players"
        ordering = ["id"]

    def __str__(self) -> str:
        return f"{self.first_name} {self.last_name}"
