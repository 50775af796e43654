from __future__ import annotations

import logging
import math
from decimal import Decimal
from typing import Dict, List, Sequence, Tuple

import numpy as np

from ..models.token import Token
from .frequency import format_frequency, frequency
from .similarity import TextSimilarity, ratio

logger = logging.getLogger(__name__)


def _dimensions(tokens_a: Sequence[Token], tokens_b: Sequence[Token]) -> List[Token]:
    # union of distinct tokens, first-seen order
    return list(dict.fromkeys([*tokens_a, *tokens_b]))


def term_vectors(
    freq_a: Dict[Token, int], freq_b: Dict[Token, int], dims: Sequence[Token]
) -> Tuple[np.ndarray, np.ndarray]:
    """Aligned int64 term-frequency vectors over dims (0 where a token is absent)."""
    n = len(dims)
    va = np.fromiter((freq_a.get(t, 0) for t in dims), dtype=np.int64, count=n)
    vb = np.fromiter((freq_b.get(t, 0) for t in dims), dtype=np.int64, count=n)
    return va, vb


def norm_product(norm_a: float, norm_b: float) -> float:
    # multiply in decimal to keep the product free of binary drift
    return float(Decimal(repr(norm_a)) * Decimal(repr(norm_b)))


class CosineTextSimilarity(TextSimilarity):
    """
    Cosine of the angle between the term-frequency vectors of both texts.

    similarity = a.b / (|a| * |b|), one dimension per distinct token.
    Integer sums are exact; floats only appear at the sqrt/division step.
    An empty side makes the denominator zero and the score NaN.
    """

    name = "cosine"
    description = "Cosine similarity over term-frequency vectors."

    def score_tokens(self, tokens_a: Sequence[Token], tokens_b: Sequence[Token]) -> float:
        freq_a = frequency(tokens_a)
        freq_b = frequency(tokens_b)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("term frequencies a:\n%s", format_frequency(freq_a))
            logger.debug("term frequencies b:\n%s", format_frequency(freq_b))

        va, vb = term_vectors(freq_a, freq_b, _dimensions(tokens_a, tokens_b))
        dot = int(va @ vb)
        norm_a = math.sqrt(int(va @ va))
        norm_b = math.sqrt(int(vb @ vb))

        score = ratio(dot, norm_product(norm_a, norm_b))
        logger.debug("cosine: dot=%d |a|=%r |b|=%r score=%r", dot, norm_a, norm_b, score)
        return score
