"""
Grade mensal do calendário.

A grade sempre tem 42 células (6 semanas de domingo a sábado), incluindo os
últimos dias do mês anterior e os primeiros dias do mês seguinte.
"""

import calendar # calendar é utilizado para obter a quantidade de dias do mês.
import datetime # datetime é utilizado para manipular datas e horas.
from typing import List, Optional, Tuple

from .calendar_event import DateGridItem
from ..utils.timeutils import local_today, to_local

GRID_SIZE = 42  # 6 linhas x 7 colunas

MONTH_NAMES = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]

WEEKDAY_NAMES = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]


def shift_month(year: int, month: int, delta: int = 0) -> Tuple[int, int]:
    """
    Desloca um mês (índice começando em zero) e normaliza o ano.

    shift_month(2024, 11, 1) -> (2025, 0)
    """
    total = year * 12 + month + delta
    return total // 12, total % 12


def get_month_grid(year: int, month: int, today: Optional[datetime.date] = None) -> List[DateGridItem]:
    """
    Gera as 42 células da página do calendário.

    Args:
        year: ano exibido
        month: índice do mês começando em zero (0 = janeiro); valores fora de
            0..11 avançam ou recuam o ano
        today: data usada para marcar o dia atual (padrão: hoje no fuso do calendário)
    """
    year, month = shift_month(year, month)
    if today is None:
        today = local_today()

    first_day = datetime.date(year, month + 1, 1)
    days_in_month = calendar.monthrange(year, month + 1)[1]
    # weekday() começa na segunda-feira; a grade começa no domingo
    offset = (first_day.weekday() + 1) % 7

    grid: List[DateGridItem] = []

    # Dias do mês anterior
    for i in range(offset, 0, -1):
        grid.append(DateGridItem(
            date=first_day - datetime.timedelta(days=i),
            is_current_month=False,
            is_today=False,
        ))

    # Dias do mês atual
    for i in range(days_in_month):
        day = first_day + datetime.timedelta(days=i)
        grid.append(DateGridItem(date=day, is_current_month=True, is_today=day == today))

    # Dias do mês seguinte até completar a grade
    next_month_start = first_day + datetime.timedelta(days=days_in_month)
    for i in range(GRID_SIZE - len(grid)):
        grid.append(DateGridItem(
            date=next_month_start + datetime.timedelta(days=i),
            is_current_month=False,
            is_today=False,
        ))

    return grid


def format_date(day: datetime.date) -> str:
    """Ex.: 'Monday, March 4, 2024'."""
    return f"{calendar.day_name[day.weekday()]}, {MONTH_NAMES[day.month - 1]} {day.day}, {day.year}"


def format_time(dt: datetime.datetime) -> str:
    """Horário no fuso do calendário, ex.: '01:00 PM'."""
    return to_local(dt).strftime("%I:%M %p")
