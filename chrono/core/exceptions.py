class ChronoError(Exception):
    """Erro base da aplicação."""


class OracleError(ChronoError):
    """Falha de transporte ou de serviço ao consultar o oráculo de linguagem natural."""


class EventFormError(ChronoError):
    """Dados inválidos no formulário de evento."""
