from __future__ import annotations
import time
from typing import List, Optional

from fastapi import FastAPI, HTTPException, Response
from pydantic import BaseModel
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST

from text_similarity import __version__
from text_similarity.config import ScorerSettings
from text_similarity.core import describe_scorers
from text_similarity.metrics import mark, observe_score
from text_similarity.scoring import score_pair


class ScoreRequest(BaseModel):
    text_a: str
    text_b: str
    strategy: Optional[str] = None
    tokenizer: Optional[str] = None


class ScoreResponse(BaseModel):
    strategy: str
    tokenizer: str
    score: Optional[float]
    finite: bool
    tokens_a: int
    tokens_b: int


class StrategyOut(BaseModel):
    key: str
    name: str
    description: str


settings = ScorerSettings.from_env()

app = FastAPI(
    title="Text Similarity",
    description="Token-based similarity scoring for one pair of texts per call.",
    version=__version__,
)


@app.post("/score", response_model=ScoreResponse)
def score(req: ScoreRequest):
    strategy = req.strategy or settings.strategy
    tokenizer = req.tokenizer or settings.tokenizer
    t0 = time.perf_counter()
    try:
        res = score_pair(req.text_a, req.text_b, strategy=strategy, tokenizer=tokenizer)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    mark(res.strategy)
    observe_score(res.strategy, res.score, (time.perf_counter() - t0) * 1000.0)
    return ScoreResponse(**res.to_dict())


@app.get("/strategies", response_model=List[StrategyOut])
def strategies():
    return [StrategyOut(**d) for d in describe_scorers()]


@app.get("/health")
def health():
    return {"status": "ok", "version": __version__}


@app.get("/metrics")
def metrics():
    data = generate_latest()
    return Response(content=data, media_type=CONTENT_TYPE_LATEST)
