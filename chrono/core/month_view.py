import datetime # datetime é utilizado para manipular datas e horas.
from typing import Iterator, List, NamedTuple, Optional
from .calendar_event import CalendarEvent, DateGridItem
from .date_grid import MONTH_NAMES, WEEKDAY_NAMES, format_time, get_month_grid, shift_month
from .event_store import EventStore
from ..utils.timeutils import local_today

MAX_VISIBLE_EVENTS = 3
CELL_WIDTH = 14


class DayCell(NamedTuple):
    item: DateGridItem
    events: List[CalendarEvent]
    hidden_count: int


class MonthView:
    """Estado da página mensal exibida: mês atual, navegação e células com eventos."""

    def __init__(self, store: EventStore, current: Optional[datetime.date] = None):
        self.store = store
        current = current or local_today()
        self.year = current.year
        self.month = current.month - 1  # índice começando em zero

    @property
    def title(self) -> str:
        return f"{MONTH_NAMES[self.month]} {self.year}"

    def previous_month(self):
        self.year, self.month = shift_month(self.year, self.month, -1)

    def next_month(self):
        self.year, self.month = shift_month(self.year, self.month, 1)

    def go_to_today(self):
        today = local_today()
        self.year, self.month = today.year, today.month - 1

    def cells(self, today: Optional[datetime.date] = None) -> Iterator[DayCell]:
        for item in get_month_grid(self.year, self.month, today):
            events = self.store.events_for_day(item.date)
            visible = events[:MAX_VISIBLE_EVENTS]
            yield DayCell(item, visible, len(events) - len(visible))

    def render(self, today: Optional[datetime.date] = None) -> str:
        """Página do mês em texto: cabeçalho, dias da semana e 6 semanas."""
        lines = [self.title, " ".join(name.ljust(CELL_WIDTH) for name in WEEKDAY_NAMES)]
        week: List[List[str]] = []

        for cell in self.cells(today):
            day = str(cell.item.date.day)
            if cell.item.is_today:
                day = f"[{day}]"
            elif not cell.item.is_current_month:
                day = f"({day})"
            entries = [day] + [f"{format_time(e.start_time)} {e.title}" for e in cell.events]
            if cell.hidden_count:
                entries.append(f"+ {cell.hidden_count} more")
            week.append(entries)

            if len(week) == len(WEEKDAY_NAMES):
                height = max(len(entries) for entries in week)
                for row in range(height):
                    lines.append(" ".join(
                        (entries[row] if row < len(entries) else "")[:CELL_WIDTH].ljust(CELL_WIDTH)
                        for entries in week
                    ).rstrip())
                week = []

        return "\n".join(lines)
