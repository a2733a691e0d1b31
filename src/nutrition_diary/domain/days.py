"""Weekday labels used by the meal plan backend."""

from datetime import date

WEEKDAY_LABELS = (
    "LUNES",
    "MARTES",
    "MIERCOLES",
    "JUEVES",
    "VIERNES",
    "SABADO",
    "DOMINGO",
)

_DISPLAY_NAMES = {
    "LUNES": "Lunes",
    "MARTES": "Martes",
    "MIERCOLES": "Miércoles",
    "JUEVES": "Jueves",
    "VIERNES": "Viernes",
    "SABADO": "Sábado",
    "DOMINGO": "Domingo",
}


def weekday_label(day: date) -> str:
    """Return the backend weekday label for a calendar date."""
    return WEEKDAY_LABELS[day.weekday()]


def format_day_name(label: str) -> str:
    """Return the display name for a weekday label."""
    known = _DISPLAY_NAMES.get(label.upper())
    if known:
        return known
    return label.capitalize()


def week_position(label: str) -> int:
    """Return the Monday-based index of a label, unknown labels sort last."""
    try:
        return WEEKDAY_LABELS.index(label.upper())
    except ValueError:
        return len(WEEKDAY_LABELS)
