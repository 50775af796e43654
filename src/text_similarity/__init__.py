from __future__ import annotations

from .core import (
    CosineTextSimilarity,
    OverlapTextSimilarity,
    SimpleTextSimilarity,
    TextSimilarity,
    available_scorers,
    get_scorer,
)
from .core.tokens import char_tokenize, get_tokenizer, whitespace_tokenize, word_tokenize
from .models.token import Token

__version__ = "1.0.0"

__all__ = [
    "Token",
    "TextSimilarity",
    "CosineTextSimilarity",
    "OverlapTextSimilarity",
    "SimpleTextSimilarity",
    "get_scorer",
    "available_scorers",
    "get_tokenizer",
    "char_tokenize",
    "whitespace_tokenize",
    "word_tokenize",
]
