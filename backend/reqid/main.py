from fastapi import FastAPI

from reqid.api.routes import router as api_router
from reqid.config import Settings, get_settings
from reqid.generator import GenReqId
from reqid.middleware import RequestIdMiddleware
from reqid.utils.context import configure_logging


def create_app(settings: Settings | None = None, gen_req_id: GenReqId | None = None) -> FastAPI:
    """Monta a aplicação com um gerador de ids próprio."""
    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(
        title="Request ID API",
        description="Atribui um identificador a cada requisição recebida.",
    )
    app.state.settings = settings
    app.add_middleware(RequestIdMiddleware, settings=settings, gen_req_id=gen_req_id)

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    app.include_router(api_router, prefix="/api")
    return app


app = create_app()
