"""Tests for weekday and calendar navigation."""

from datetime import date

from nutrition_diary.domain.days import format_day_name, week_position, weekday_label
from nutrition_diary.services.navigation import (
    WeekdayCursor,
    next_date,
    previous_date,
)


def test_weekday_cursor_stops_at_bounds() -> None:
    cursor = WeekdayCursor()
    cursor.set_available_days(["MONDAY", "WEDNESDAY", "FRIDAY"])

    assert cursor.selected_day == "MONDAY"
    assert cursor.previous() is False
    assert cursor.selected_day == "MONDAY"

    cursor.select("FRIDAY")
    assert cursor.next() is False
    assert cursor.selected_day == "FRIDAY"


def test_weekday_cursor_moves_in_declared_order() -> None:
    cursor = WeekdayCursor(selected_day="VIERNES")
    cursor.set_available_days(["VIERNES", "LUNES", "MIERCOLES"])

    assert cursor.next() is True
    assert cursor.selected_day == "LUNES"
    assert cursor.can_go_previous is True
    assert cursor.can_go_next is True


def test_select_rejects_days_outside_the_plan() -> None:
    cursor = WeekdayCursor()
    cursor.set_available_days(["LUNES"])

    assert cursor.select("MARTES") is False
    assert cursor.selected_day == "LUNES"


def test_select_accepts_any_day_without_plan() -> None:
    cursor = WeekdayCursor(selected_day="LUNES")

    assert cursor.select("MARTES") is True
    assert cursor.can_go_previous is False
    assert cursor.can_go_next is False


def test_adjacent_dates_cross_month_and_year() -> None:
    assert previous_date("2024-01-15") == "2024-01-14"
    assert next_date("2024-01-15") == "2024-01-16"
    assert next_date("2024-02-28") == "2024-02-29"
    assert next_date("2023-12-31") == "2024-01-01"
    assert previous_date("2024-03-01") == "2024-02-29"


def test_day_labels() -> None:
    assert weekday_label(date(2024, 1, 15)) == "LUNES"
    assert weekday_label(date(2024, 1, 21)) == "DOMINGO"
    assert format_day_name("MIERCOLES") == "Miércoles"
    assert format_day_name("SABADO") == "Sábado"
    assert format_day_name("MONDAY") == "Monday"
    assert week_position("VIERNES") < week_position("DOMINGO")
    assert week_position("UNKNOWN") == 7
