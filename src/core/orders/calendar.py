# src/core/orders/calendar.py
"""
Календарь выборки заказов.
Чистая логика дат: выходные, праздники, границы окна "за N дней".
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, time, timedelta, timezone
from typing import Iterable

# date.weekday(): суббота = 5, воскресенье = 6
WEEKEND_DAYS = frozenset({5, 6})

DEFAULT_HOLIDAYS: tuple[tuple[int, int], ...] = ((8, 15), (8, 19))


@dataclass(frozen=True)
class HolidayCalendar:
    """
    Набор праздников в виде пар (месяц, день).

    Пара проверяется относительно года самой даты-кандидата, поэтому
    окно, пересекающее границу года, оценивается по праздникам каждого года.
    """
    holidays: frozenset[tuple[int, int]] = field(default_factory=lambda: frozenset(DEFAULT_HOLIDAYS))

    @classmethod
    def from_pairs(cls, pairs: Iterable[Iterable[int]]) -> HolidayCalendar:
        """Создаёт календарь из пар [месяц, день] (формат config.json)."""
        return cls(holidays=frozenset((int(month), int(day)) for month, day in pairs))

    @classmethod
    def default(cls) -> HolidayCalendar:
        return cls()

    def is_weekend(self, day: date) -> bool:
        return day.weekday() in WEEKEND_DAYS

    def is_holiday(self, day: date) -> bool:
        return (day.month, day.day) in self.holidays

    def is_business_day(self, day: date) -> bool:
        return not (self.is_weekend(day) or self.is_holiday(day))

    def calculate_start_date(self, days: int, today: date) -> date:
        """
        Начало окна выборки за `days` дней до `today`.

        Граница сдвигается только назад (окно расширяется), пока не попадёт
        на рабочий день.
        """
        start_date = today - timedelta(days=days)
        while not self.is_business_day(start_date):
            start_date -= timedelta(days=1)
        return start_date

    def window(self, days: int, today: date) -> OrderWindow:
        """Границы окна: [начало рабочего дня start_date, полночь today] в UTC."""
        return OrderWindow(
            start=_midnight_utc(self.calculate_start_date(days, today)),
            end=_midnight_utc(today),
        )


@dataclass(frozen=True)
class OrderWindow:
    """Диапазон дат создания заказа (обе границы включительно)."""
    start: datetime
    end: datetime

    def __contains__(self, moment: datetime) -> bool:
        return self.start <= moment <= self.end


def _midnight_utc(day: date) -> datetime:
    return datetime.combine(day, time.min, tzinfo=timezone.utc)
