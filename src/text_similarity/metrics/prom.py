from __future__ import annotations
import math
from prometheus_client import Counter, Histogram

REQS = Counter("tsim_scores_total", "Total scoring calls", ["strategy"])
NONFINITE = Counter("tsim_nonfinite_scores_total", "Scores that came out NaN/inf", ["strategy"])
LAT = Histogram("tsim_score_latency_ms", "Scoring latency ms", ["strategy"])


def mark(strategy: str) -> None:
    REQS.labels(strategy=strategy).inc()


def observe_score(strategy: str, score: float, elapsed_ms: float) -> None:
    LAT.labels(strategy=strategy).observe(elapsed_ms)
    if not math.isfinite(score):
        NONFINITE.labels(strategy=strategy).inc()
