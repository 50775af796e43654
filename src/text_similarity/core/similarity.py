from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Optional, Sequence

import numpy as np

from ..models.token import Token
from .tokens import Tokenizer, char_tokenize, tokenizer_name

logger = logging.getLogger(__name__)


def ratio(num: float, den: float) -> float:
    """
    num / den with IEEE semantics: a zero denominator gives NaN or +/-inf
    instead of raising ZeroDivisionError.
    """
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(num) / np.float64(den))


class TextSimilarity(ABC):
    """
    Scores two texts: tokenize both, then hand the token lists to score_tokens().

    Subclasses only implement score_tokens(); tokenization is fixed here so
    every strategy sees input prepared the same way. The returned value is
    never post-processed, so degenerate inputs surface as NaN/inf.
    """

    name: str = "abstract"
    description: str = ""

    def __init__(self, tokenizer: Optional[Tokenizer] = None) -> None:
        self._tokenizer: Tokenizer = tokenizer if tokenizer is not None else char_tokenize

    @property
    def tokenizer(self) -> Tokenizer:
        return self._tokenizer

    @property
    def tokenizer_name(self) -> str:
        return tokenizer_name(self._tokenizer)

    def tokenize(self, text: Optional[str]) -> Sequence[Token]:
        return self._tokenizer(text or "")

    def similar_score(self, text_a: Optional[str], text_b: Optional[str]) -> float:
        tokens_a = self.tokenize(text_a)
        tokens_b = self.tokenize(text_b)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "%s: %d tokens vs %d tokens", self.name, len(tokens_a), len(tokens_b)
            )
        return self.score_tokens(tokens_a, tokens_b)

    @abstractmethod
    def score_tokens(self, tokens_a: Sequence[Token], tokens_b: Sequence[Token]) -> float:
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}(tokenizer={self.tokenizer_name!r})"
