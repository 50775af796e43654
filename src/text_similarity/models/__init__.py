from __future__ import annotations

from .score import ScoreResult
from .token import Token

__all__ = ["Token", "ScoreResult"]
