"""Id da requisição corrente e sua propagação para os logs."""
import logging
from contextvars import ContextVar, Token

from reqid.config import Settings

# Id da requisição em andamento (isolado por task/contexto)
_request_id_var: ContextVar[str | None] = ContextVar("request_id", default=None)

NO_REQUEST_ID = "-"


def set_request_id(request_id: str) -> Token:
    """Define o id da requisição no contexto atual."""
    return _request_id_var.set(request_id)


def get_request_id() -> str | None:
    """Obtém o id da requisição corrente, ou None fora de uma requisição."""
    return _request_id_var.get()


def reset_request_id(token: Token) -> None:
    """Restaura o valor anterior ao set_request_id correspondente."""
    _request_id_var.reset(token)


class RequestIdLogFilter(logging.Filter):
    """Anexa o id da requisição corrente ao registro de log, sob o atributo `label`."""

    def __init__(self, label: str = "reqId"):
        super().__init__()
        self.label = label

    def filter(self, record: logging.LogRecord) -> bool:
        setattr(record, self.label, get_request_id() or NO_REQUEST_ID)
        return True


def configure_logging(settings: Settings) -> logging.Handler:
    """Instala um handler no logger do pacote com o id da requisição no formato."""
    label = settings.request_id_log_label
    handler = logging.StreamHandler()
    handler.addFilter(RequestIdLogFilter(label))
    handler.setFormatter(
        logging.Formatter(f"%(asctime)s %(levelname)s [%({label})s] %(name)s: %(message)s")
    )

    logger = logging.getLogger("reqid")
    for existing in list(logger.handlers):
        if any(isinstance(f, RequestIdLogFilter) for f in existing.filters):
            logger.removeHandler(existing)
    logger.addHandler(handler)
    logger.setLevel(settings.log_level)
    # Registros do pacote não sobem para o handler raiz
    logger.propagate = False
    return handler
