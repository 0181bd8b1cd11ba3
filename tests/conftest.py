import pytest

from swedish_ssn.core.settings import get_settings


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch: pytest.MonkeyPatch):
    for name in (
        "SSN_LOG_LEVEL",
        "SSN_MASK_CHAR",
        "SSN_ALLOW_COORDINATION",
        "SSN_COUNTY_CHECK",
        "SSN_DEFAULT_COUNTRY",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
