from django import forms
from django.core.exceptions import ValidationError

from .coercion import COUNTER_FIELDS, NAME_FIELDS, coerce_player
from .models import Player

POSITION_CHOICES = [("", "-")] + list(Player.Position.choices)


def _number_input(**attrs):
    return forms.TextInput(attrs={"inputmode": "decimal", **attrs})


class PlayerForm(forms.Form):
    """Every field is kept as raw text; ``clean`` coerces to storage types.

    After a successful ``is_valid()`` the typed record is in ``self.record``.
    """

    first_name = forms.CharField(max_length=100)
    last_name = forms.CharField(max_length=100)
    jersey_number = forms.CharField(required=False, widget=_number_input())
    position = forms.ChoiceField(choices=POSITION_CHOICES, required=False)
    nationality = forms.CharField(required=False, max_length=100)
    date_of_birth = forms.CharField(
        required=False, widget=forms.TextInput(attrs={"type": "date"})
    )
    height_cm = forms.CharField(required=False, widget=_number_input())
    weight_kg = forms.CharField(required=False, widget=_number_input())
    team_name = forms.CharField(required=False, max_length=150)
    league = forms.CharField(required=False, max_length=150)
    goals = forms.CharField(required=False, initial="0", widget=_number_input())
    assists = forms.CharField(required=False, initial="0", widget=_number_input())
    yellow_cards = forms.CharField(required=False, initial="0", widget=_number_input())
    red_cards = forms.CharField(required=False, initial="0", widget=_number_input())

    record = None

    def clean(self):
        cleaned = super().clean()
        if any(field in self.errors for field in NAME_FIELDS):
            return cleaned
        try:
            self.record = coerce_player(cleaned)
        except ValidationError as exc:
            if hasattr(exc, "error_dict"):
                for field, errors in exc.error_dict.items():
                    self.add_error(field, errors)
            else:
                raise
        return cleaned

    @property
    def profile_fields(self):
        return [field for field in self if field.name not in COUNTER_FIELDS]

    @property
    def counter_fields(self):
        return [self[name] for name in COUNTER_FIELDS]
