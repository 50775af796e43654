from __future__ import annotations

from typing import List, Tuple

from .core import get_scorer
from .core.tokens import get_tokenizer
from .models.score import ScoreResult

DEMO_TEXTS: Tuple[str, ...] = ("我爱购物", "我爱读书", "他是黑客")


def score_pair(text_a: str, text_b: str, strategy: str = "cosine", tokenizer: str = "chars") -> ScoreResult:
    scorer = get_scorer(strategy, tokenizer=get_tokenizer(tokenizer))
    score = scorer.similar_score(text_a, text_b)
    return ScoreResult(
        strategy=scorer.name,
        tokenizer=tokenizer,
        score=score,
        tokens_a=len(scorer.tokenize(text_a)),
        tokens_b=len(scorer.tokenize(text_b)),
    )


def demo_pairs(texts: Tuple[str, ...] = DEMO_TEXTS) -> List[Tuple[str, str]]:
    # upper triangle including self pairs: (1,1) (1,2) (1,3) (2,2) ...
    return [(a, b) for i, a in enumerate(texts) for b in texts[i:]]
