from fastapi import Request

from .config import Settings, get_settings


def get_app_settings(request: Request) -> Settings:
    """Configurações com que a aplicação foi montada (ou as globais)."""
    settings = getattr(request.app.state, "settings", None)
    return settings or get_settings()


def get_request_id(request: Request) -> str | None:
    """Id atribuído pelo RequestIdMiddleware à requisição corrente."""
    return getattr(request.state, "request_id", None)
