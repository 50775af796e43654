from .prom import LAT, NONFINITE, REQS, mark, observe_score

__all__ = ["REQS", "NONFINITE", "LAT", "mark", "observe_score"]
