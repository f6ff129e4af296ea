import logging
from typing import Any

from fastapi import APIRouter, Depends

from reqid.config import Settings
from reqid.deps import get_app_settings, get_request_id

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/request-id")
async def read_request_id(request_id: str | None = Depends(get_request_id)) -> dict[str, Any]:
    """Devolve o id atribuído a esta requisição."""
    logger.info("Consulta de request id")
    return {"request_id": request_id}


@router.get("/settings")
def read_settings(settings: Settings = Depends(get_app_settings)) -> dict[str, Any]:
    """Expõe como os ids de requisição estão sendo atribuídos."""
    return {
        "request_id_header": settings.request_id_header,
        "request_id_log_label": settings.request_id_log_label,
        "response_header": settings.response_header,
    }
