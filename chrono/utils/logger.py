import sys # sys é utilizado para enviar os logs ao console.
from typing import Optional
from loguru import logger # loguru é a biblioteca de logging da aplicação.

from ..config.settings import config # configurações do projeto

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"


def setup_logging(level: str = config.log.log_level, log_file: Optional[str] = config.log.log_file):
    """
    Reconfigura os handlers do logger do calendário.

    O console sempre recebe os logs; o arquivo (com rotação) só quando
    log_file não estiver vazio.
    """
    logger.remove()
    logger.add(sys.stderr, level=level, format=CONSOLE_FORMAT)
    if log_file:
        logger.add(log_file, rotation="10 MB", retention="1 week", level=level, format=FILE_FORMAT)


setup_logging()
