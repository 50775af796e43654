"""Runtime settings for the scorer surfaces (CLI and HTTP API)."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .core import available_scorers
from .core.tokens import available_tokenizers

ENV_PREFIX = "TSIM_"


@dataclass(frozen=True)
class ScorerSettings:
    strategy: str = "cosine"
    tokenizer: str = "chars"
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.strategy not in (*available_scorers(), "simple"):
            raise ValueError(f"Unknown similarity strategy '{self.strategy}'")
        if self.tokenizer not in available_tokenizers():
            raise ValueError(f"Unknown tokenizer '{self.tokenizer}'")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValueError(f"Unknown log level '{self.log_level}'")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ScorerSettings":
        env = os.environ if environ is None else environ
        return cls(
            strategy=env.get(ENV_PREFIX + "STRATEGY", "cosine").strip(),
            tokenizer=env.get(ENV_PREFIX + "TOKENIZER", "chars").strip(),
            log_level=env.get(ENV_PREFIX + "LOG_LEVEL", "WARNING").strip().upper(),
        )


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
