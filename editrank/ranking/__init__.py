"""Edit-distance ranking: distance engine, substitutions, and the ranking pipeline."""

from editrank.ranking.distance import get_distance_fn, levenshtein
from editrank.ranking.pipeline import rank
from editrank.ranking.substitute import MalformedRuleError, apply_rules, load_rules

__all__ = [
    "MalformedRuleError",
    "apply_rules",
    "get_distance_fn",
    "levenshtein",
    "load_rules",
    "rank",
]
