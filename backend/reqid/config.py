from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    request_id_header: str | None = None  # Header confiável com o id vindo do cliente (None desabilita)
    request_id_log_label: str = "reqId"  # Nome do atributo com o id nos registros de log
    response_header: str | None = "x-request-id"  # Header de resposta que devolve o id (None desabilita)
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="REQID_",
        case_sensitive=False,
    )

    @field_validator("request_id_header", "response_header", mode="before")
    @classmethod
    def _normalize_header(cls, value: str | None) -> str | None:
        if value is None:
            return None
        value = str(value).strip().lower()
        return value or None

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        return value.upper()


@lru_cache
def get_settings() -> Settings:
    return Settings()
