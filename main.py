import argparse
import asyncio
import datetime
import sys

from chrono.adapters.local_storage import EventStorage
from chrono.adapters.openai_oracle import OpenAIOracle
from chrono.core.date_grid import format_date, format_time
from chrono.core.event_store import EventStore
from chrono.core.magic_mapper import MagicEventMapper
from chrono.core.month_view import MonthView
from chrono.utils.timeutils import local_now, to_local
from chrono.utils.logger import logger


def _parse_month(value: str) -> datetime.date:
    return datetime.datetime.strptime(value, "%Y-%m").date()


def _parse_day(value: str) -> datetime.date:
    return datetime.date.fromisoformat(value)


def print_day(store: EventStore, day: datetime.date):
    print(format_date(day))
    events = store.events_for_day(day)
    if not events:
        print("  (sem eventos)")
    for event in events:
        print(f"  {format_time(event.start_time)}-{format_time(event.end_time)} {event.title} [{event.color.value}] {event.id}")


def main():
    """Função principal: mostra o calendário e cria/exclui eventos."""
    parser = argparse.ArgumentParser(description='Calendário local com criação de eventos em linguagem natural')

    parser.add_argument('--month', type=_parse_month, help='Mês exibido (YYYY-MM); padrão: mês atual')
    parser.add_argument('--day', type=_parse_day, help='Lista os eventos de um dia (YYYY-MM-DD)')
    parser.add_argument('--magic', metavar='TEXTO', help="Cria um evento a partir de texto livre, ex.: 'Almoço amanhã às 13h'")
    parser.add_argument('--delete', metavar='ID', help='Exclui o evento com o identificador informado')

    args = parser.parse_args()

    try:
        store = EventStore.load(EventStorage())

        if args.delete:
            if not store.delete_event(args.delete):
                logger.warning(f"Nenhum evento com o identificador {args.delete}")
                return 1

        if args.magic:
            mapper = MagicEventMapper(OpenAIOracle())
            event = asyncio.run(mapper.create_event(args.magic, local_now()))
            if event is None:
                logger.error("Não foi possível entender o texto. Tente algo como 'Lunch tomorrow at 1pm'.")
                return 1
            event = store.add_event(event)
            print_day(store, to_local(event.start_time).date())

        if args.day:
            print_day(store, args.day)
        elif not args.magic:
            print(MonthView(store, args.month).render())

    except Exception as e:
        logger.error(f"Erro durante a execução: {e}")
        return 1

    return 0

if __name__ == "__main__":
    sys.exit(main())
