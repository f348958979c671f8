"""Command-line interface: rank lines by edit distance to a query."""

from __future__ import annotations

import argparse
import sys
from typing import List

from editrank import __version__
from editrank.config import build_config
from editrank.ranking.distance import ENGINES, get_distance_fn
from editrank.ranking.io import read_lines, write_ranking
from editrank.ranking.pipeline import rank
from editrank.ranking.substitute import MalformedRuleError, load_rules
from editrank.shared.log import eprint


def parse_args(argv: List[str] | None = None):
    parser = argparse.ArgumentParser(
        prog="editrank",
        description="Sort lines by Levenshtein edit distance to a query word.",
    )
    parser.add_argument("query", type=str, help="Word or phrase to compare every line against.")
    parser.add_argument(
        "corpus",
        type=str,
        nargs="?",
        default=None,
        help="File with one candidate per line. Reads stdin when omitted or '-'.",
    )
    parser.add_argument(
        "-i",
        "--ignore-case",
        action=argparse.BooleanOptionalAction,
        default=argparse.SUPPRESS,
        help="Lower-case the query, the candidates and the rule patterns before matching.",
    )
    parser.add_argument(
        "-s",
        "--substitutions",
        type=str,
        default=argparse.SUPPRESS,
        help=(
            "Tab-separated rules file (match<TAB>replacement, one per line). "
            "Rules rewrite candidates before scoring; output shows the original lines."
        ),
    )
    parser.add_argument(
        "--regex-rules",
        action=argparse.BooleanOptionalAction,
        default=argparse.SUPPRESS,
        help="Treat rule match fields as regular expressions instead of literal text.",
    )
    parser.add_argument(
        "-r",
        "--reverse",
        action=argparse.BooleanOptionalAction,
        default=argparse.SUPPRESS,
        help="Sort from least to most similar (--no-reverse overrides a config file).",
    )
    parser.add_argument(
        "--scale",
        action=argparse.BooleanOptionalAction,
        default=argparse.SUPPRESS,
        help="Print similarity 1 - distance/max instead of the raw distance.",
    )
    parser.add_argument(
        "--precision",
        type=int,
        default=argparse.SUPPRESS,
        help="Decimal places for scaled scores (default: full precision).",
    )
    parser.add_argument(
        "--separator",
        type=str,
        default=argparse.SUPPRESS,
        help="Separator between value and line (default: ',').",
    )
    parser.add_argument(
        "--engine",
        type=str,
        choices=sorted(ENGINES),
        default=argparse.SUPPRESS,
        help="Distance implementation: 'builtin' (pure Python) or 'rapidfuzz' (C extension).",
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="YAML config file. Defaults to ./editrank.yaml or ./.editrank.yaml when present.",
    )
    parser.add_argument("--out", type=str, default="-", help="Output file path ('-' for stdout).")
    parser.add_argument("--verbose", action="store_true", help="Print a summary to stderr.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser.parse_args(argv)


def main(argv: List[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)

    try:
        cfg = build_config(args)
    except (OSError, ValueError) as e:
        eprint(f"error: config: {e}")
        return 2

    try:
        corpus = read_lines(args.corpus)
    except (OSError, ValueError) as e:
        eprint(f"error: cannot read corpus: {e}")
        return 2

    rules = None
    if cfg.substitutions:
        try:
            rules = load_rules(cfg.substitutions, case_fold=cfg.ignore_case, regex=cfg.regex_rules)
        except (OSError, MalformedRuleError) as e:
            eprint(f"error: substitutions: {e}")
            return 1

    ranking = rank(
        args.query,
        corpus,
        rules=rules,
        case_fold=cfg.ignore_case,
        reverse=cfg.reverse,
        scaled=cfg.scale,
        distance_fn=get_distance_fn(cfg.engine),
    )

    if args.verbose:
        eprint(f"[info] ranked {len(ranking)} line(s) against {args.query!r}")
        if rules is not None:
            eprint(f"[info] applied {len(rules)} substitution rule(s) from {cfg.substitutions}")
        if len(ranking):
            eprint(f"[info] distance range: {ranking.min_distance}..{ranking.max_distance}")
        if ranking.scaled and ranking.max_distance == 0:
            eprint("[info] all distances are zero; every scaled score is 1.0")

    try:
        write_ranking(ranking, out=args.out, separator=cfg.separator, precision=cfg.precision)
    except OSError as e:
        eprint(f"error: cannot write output: {e}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
