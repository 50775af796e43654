from __future__ import annotations

import logging
from typing import Sequence

from ..models.token import Token
from .similarity import TextSimilarity, ratio

logger = logging.getLogger(__name__)


class OverlapTextSimilarity(TextSimilarity):
    """
    Shared-word score: characters of A's tokens that also occur in B, over
    the character length of the shorter text.

    The numerator walks every occurrence in A and checks membership in B's
    token set, so it is not symmetric when duplicates differ between A and B;
    the denominator min(len_a, len_b) is. Both texts empty gives NaN.
    """

    name = "overlap"
    description = "Shared-token character length over the shorter text's length."

    def score_tokens(self, tokens_a: Sequence[Token], tokens_b: Sequence[Token]) -> float:
        len_a = sum(t.length for t in tokens_a)
        len_b = sum(t.length for t in tokens_b)
        members_b = set(tokens_b)
        shared = sum(t.length for t in tokens_a if t in members_b)

        score = ratio(shared, min(len_a, len_b))
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("overlap: len_a=%d len_b=%d shared=%d", len_a, len_b, shared)
            logger.debug("overlap: score=%d/min(%d, %d)=%r", shared, len_a, len_b, score)
        return score


# class-level alias for the "simple" strategy key (see core.get_scorer)
SimpleTextSimilarity = OverlapTextSimilarity
