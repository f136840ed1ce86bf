import os # os é utilizado para substituir arquivos de forma atômica.
from pathlib import Path # Path é utilizado para montar os caminhos dos arquivos.
from typing import List, Optional # List e Optional são utilizados para definir tipos de retorno.
from pydantic import TypeAdapter, ValidationError # TypeAdapter valida e serializa a lista de eventos.
from ..core.calendar_event import CalendarEvent # CalendarEvent é o modelo persistido.
from ..config.settings import config # config é utilizado para acessar as configurações do sistema.
from ..utils.logger import logger # logger do sistema.

_EVENT_LIST = TypeAdapter(List[CalendarEvent])


class LocalStorage:
    """Armazenamento chave/valor local: cada chave é um arquivo dentro do diretório configurado."""

    def __init__(self, directory: Optional[str] = None):
        self.directory = Path(directory or config.storage.storage_dir)

    def _path(self, key: str) -> Path:
        return self.directory / f"{key}.json"

    def get_item(self, key: str) -> Optional[str]:
        """Lê o valor guardado na chave; retorna None se a chave não existir."""
        path = self._path(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def set_item(self, key: str, value: str) -> None:
        """Grava o valor na chave (escrita em arquivo temporário seguida de os.replace)."""
        self.directory.mkdir(parents=True, exist_ok=True)
        path = self._path(key)
        tmp = path.with_suffix(path.suffix + ".tmp")
        tmp.write_text(value, encoding="utf-8")
        os.replace(tmp, path)

    def remove_item(self, key: str) -> None:
        path = self._path(key)
        if path.exists():
            path.unlink()


class EventStorage:
    """Persiste a coleção inteira de eventos como um único array JSON em uma chave."""

    def __init__(self, storage: Optional[LocalStorage] = None, key: Optional[str] = None):
        self.storage = storage or LocalStorage()
        self.key = key or config.storage.events_key

    def load(self) -> List[CalendarEvent]:
        """
        Carrega os eventos salvos.

        Chave ausente resulta em lista vazia. Dados ilegíveis ou corrompidos também
        resultam em lista vazia, com um aviso no log. Identificadores repetidos
        mantêm apenas o primeiro registro.
        """
        try:
            raw = self.storage.get_item(self.key)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Não foi possível ler os eventos salvos em '{self.key}': {e}")
            return []

        if raw is None or not raw.strip():
            logger.debug(f"Nenhum evento salvo em '{self.key}'")
            return []

        try:
            events = _EVENT_LIST.validate_json(raw)
        except ValidationError as e:
            logger.warning(f"Eventos salvos em '{self.key}' estão corrompidos, iniciando vazio: {e}")
            return []

        unique = []
        seen = set()
        for event in events:
            if event.id in seen:
                logger.warning(f"Evento duplicado ignorado em '{self.key}': {event.id}")
                continue
            seen.add(event.id)
            unique.append(event)

        logger.info(f"Carregados {len(unique)} eventos de '{self.key}'")
        return unique

    def save(self, events: List[CalendarEvent]) -> None:
        """Grava a coleção inteira de eventos."""
        raw = _EVENT_LIST.dump_json(events, by_alias=True, exclude_none=True)
        self.storage.set_item(self.key, raw.decode("utf-8"))
        logger.debug(f"Salvos {len(events)} eventos em '{self.key}'")
