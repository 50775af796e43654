from __future__ import annotations

import pytest


@pytest.fixture(autouse=True)
def _clean_tsim_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in ("TSIM_STRATEGY", "TSIM_TOKENIZER", "TSIM_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
