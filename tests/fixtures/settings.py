import os
from collections.abc import Generator

import pytest

from leseliste.config import Settings, get_settings
from leseliste.constants import ENV_PREFIX


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Run every test without a local .env file or LL_* variables."""
    for name in list(os.environ):
        if name.upper().startswith(ENV_PREFIX):
            monkeypatch.delenv(name)

    original_config = Settings.model_config.copy()
    Settings.model_config["env_file"] = None
    get_settings.cache_clear()

    yield

    Settings.model_config = original_config
    get_settings.cache_clear()
