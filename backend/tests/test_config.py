import pytest

from reqid.config import Settings


def test_defaults(monkeypatch: pytest.MonkeyPatch):
    for name in ("REQID_REQUEST_ID_HEADER", "REQID_RESPONSE_HEADER", "REQID_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)

    assert settings.request_id_header is None
    assert settings.request_id_log_label == "reqId"
    assert settings.response_header == "x-request-id"
    assert settings.log_level == "INFO"


def test_reads_environment(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("REQID_REQUEST_ID_HEADER", "X-Request-Id")
    monkeypatch.setenv("REQID_LOG_LEVEL", "debug")

    settings = Settings(_env_file=None)

    assert settings.request_id_header == "x-request-id"
    assert settings.log_level == "DEBUG"


def test_empty_headers_disable_feature():
    settings = Settings(_env_file=None, request_id_header="  ", response_header="")

    assert settings.request_id_header is None
    assert settings.response_header is None
