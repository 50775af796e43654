from __future__ import annotations
import argparse, json, sys

from text_similarity.config import ScorerSettings, configure_logging
from text_similarity.core import available_scorers, describe_scorers
from text_similarity.core.tokens import available_tokenizers
from text_similarity.scoring import DEMO_TEXTS, demo_pairs, score_pair

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def build_parser(settings: ScorerSettings | None = None) -> argparse.ArgumentParser:
    strategies = sorted([*available_scorers(), "simple"])
    tokenizers = sorted(available_tokenizers())

    p = argparse.ArgumentParser(prog="tsim", description="Token-based text similarity scoring")
    s = settings
    if s is None:
        try:
            s = ScorerSettings.from_env()
        except ValueError as e:
            p.error(str(e))
    p.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, default=s.log_level)
    sub = p.add_subparsers(dest="cmd", required=True)

    sc = sub.add_parser("score", help="Score one pair of texts")
    sc.add_argument("text_a")
    sc.add_argument("text_b")
    sc.add_argument("--strategy", choices=strategies, default=s.strategy)
    sc.add_argument("--tokenizer", choices=tokenizers, default=s.tokenizer)
    sc.add_argument("--json", action="store_true", help="Emit the full result as JSON")

    d = sub.add_parser("demo", help="Score the built-in example texts pairwise")
    d.add_argument("--strategy", choices=strategies, default=s.strategy)
    d.add_argument("--tokenizer", choices=tokenizers, default=s.tokenizer)

    sub.add_parser("strategies", help="List available scoring strategies")
    return p


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    if args.cmd == "score":
        res = score_pair(args.text_a, args.text_b, strategy=args.strategy, tokenizer=args.tokenizer)
        if args.json:
            print(json.dumps(res.to_dict(), ensure_ascii=False, sort_keys=True))
        else:
            print(res.score)
        return 0

    if args.cmd == "demo":
        for a, b in demo_pairs(DEMO_TEXTS):
            res = score_pair(a, b, strategy=args.strategy, tokenizer=args.tokenizer)
            print(f"{a} vs {b}: {res.score}")
        return 0

    if args.cmd == "strategies":
        for d in describe_scorers():
            print(f"{d['key']}\t{d['description']}")
        return 0

    return 2


if __name__ == "__main__":
    raise SystemExit(main())
