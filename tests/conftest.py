from pathlib import Path
from typing import Generator

import pytest

from rikskurs.config import config
from tests.helpers.stub_provider import StubRateProvider


@pytest.fixture(scope="function")
def provider() -> StubRateProvider:
    return StubRateProvider()


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Generator[None, None, None]:
    for name in ("DEFAULT_DATE_POLICY", "FALLBACK_DATE", "RIKSBANK_API_KEY", "REQUEST_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    config.cache_clear()
    yield
    config.cache_clear()
