"""Gerador de identificadores de requisição."""
from collections.abc import Callable, Mapping
from threading import Lock
from typing import Any

from reqid.utils.ids import format_request_id

GenReqId = Callable[[], str]


def _get_headers(request: Any) -> Mapping[str, str] | None:
    """Extrai os headers de um objeto de requisição ou de um dict."""
    if request is None:
        return None
    if isinstance(request, Mapping):
        return request.get("headers")
    return getattr(request, "headers", None)


class ReqIdGenerator:
    """Gera ids por requisição: header configurado, estratégia customizada ou contador.

    Cada instância mantém o próprio contador; instâncias diferentes nunca
    compartilham estado.
    """

    def __init__(
        self,
        request_id_header: str | None = None,
        gen_req_id: GenReqId | None = None,
    ):
        self._request_id_header = request_id_header
        self._gen_req_id = gen_req_id
        self._counter = 0
        self._lock = Lock()

    def __call__(self, request: Any = None) -> str:
        if self._request_id_header and request is not None:
            headers = _get_headers(request)
            if isinstance(headers, Mapping):
                value = headers.get(self._request_id_header)
                if value and isinstance(value, str):
                    return value

        if self._gen_req_id is not None:
            return self._gen_req_id()

        with self._lock:
            self._counter += 1
            counter = self._counter
        return format_request_id(counter)


def req_id_gen_factory(
    request_id_header: str | None = None,
    gen_req_id: GenReqId | None = None,
) -> ReqIdGenerator:
    """Cria um novo gerador com contador próprio, começando em 'req-1'."""
    return ReqIdGenerator(request_id_header, gen_req_id)
