"""Middleware que atribui um id a cada requisição recebida."""
import logging

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from reqid.config import Settings
from reqid.generator import GenReqId, req_id_gen_factory
from reqid.utils.context import reset_request_id, set_request_id

logger = logging.getLogger(__name__)


class RequestIdMiddleware(BaseHTTPMiddleware):
    def __init__(
        self,
        app: ASGIApp,
        settings: Settings,
        gen_req_id: GenReqId | None = None,
    ):
        super().__init__(app)
        self.response_header = settings.response_header
        # Um gerador por aplicação: o contador vive enquanto o servidor estiver de pé
        self.generate = req_id_gen_factory(settings.request_id_header, gen_req_id)

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = self.generate(request)
        request.state.request_id = request_id

        token = set_request_id(request_id)
        try:
            logger.debug(f"{request.method} {request.url.path}")
            response = await call_next(request)
        finally:
            reset_request_id(token)

        if self.response_header:
            response.headers[self.response_header] = request_id
        return response
