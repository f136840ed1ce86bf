import os # os é utilizado para ler as variáveis de ambiente
from typing import Optional # Optional é utilizado para campos que podem não existir
from dotenv import load_dotenv # utilizado para carregar as variaveis de ambiente
from pydantic import BaseModel # basemodel é uma classe que permite criar classes com tipos de dados

load_dotenv() # carregando as variáveis de ambiente

# configurando o armazenamento local
class StorageConfig(BaseModel):
    storage_dir: str = os.getenv("STORAGE_DIR", ".chrono")
    events_key: str = os.getenv("EVENTS_STORAGE_KEY", "chrono_events")

# Configuração do oráculo (modelo de linguagem)
class OracleConfig(BaseModel):
    api_key: str = os.getenv("OPENAI_API_KEY", "")
    model: str = os.getenv("OPENAI_MODEL", "gpt-4o-mini")
    base_url: Optional[str] = os.getenv("OPENAI_BASE_URL") or None

# Configuração do calendário
class CalendarConfig(BaseModel):
    timezone: str = os.getenv("CALENDAR_TIMEZONE", "UTC")
    default_event_duration_minutes: int = int(os.getenv("DEFAULT_EVENT_DURATION_MINUTES", "60"))

# Configuração de logs
class LogConfig(BaseModel):
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "chrono_calendar.log")

# Classe principal de configuração
class Config(BaseModel):
    storage: StorageConfig = StorageConfig()
    oracle: OracleConfig = OracleConfig()
    calendar: CalendarConfig = CalendarConfig()
    log: LogConfig = LogConfig()

# Criando uma instância global de configuração
config = Config()
