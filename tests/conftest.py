import pytest


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """사용자 환경 변수가 테스트 결과에 영향을 주지 않도록."""
    for name in ("EXPRTREE_LOG_LEVEL", "EXPRTREE_FORMAT", "EXPRTREE_ASCII_TREE"):
        monkeypatch.delenv(name, raising=False)
