from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class ScoreResult:
    strategy: str
    tokenizer: str
    score: float  # NaN/inf kept as-is for degenerate inputs
    tokens_a: int
    tokens_b: int

    @property
    def finite(self) -> bool:
        return math.isfinite(self.score)

    def to_dict(self) -> Dict[str, Any]:
        # JSON has no NaN: non-finite scores travel as null
        score: Optional[float] = float(self.score) if self.finite else None
        return {
            "strategy": self.strategy,
            "tokenizer": self.tokenizer,
            "score": score,
            "finite": self.finite,
            "tokens_a": int(self.tokens_a),
            "tokens_b": int(self.tokens_b),
        }
