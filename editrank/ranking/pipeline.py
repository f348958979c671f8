"""Candidate normalization, distance scoring, paired sort and scaling."""

from __future__ import annotations

from typing import List, Optional, Sequence

from editrank.ranking.distance import DistanceFn, levenshtein
from editrank.ranking.models import RankedRecord, Ranking
from editrank.ranking.substitute import SubstitutionRuleSet, apply_rules
from editrank.shared.log import debug


def normalize(line: str, rules: Optional[SubstitutionRuleSet] = None, case_fold: bool = False) -> str:
    """Candidate text used for scoring: lower-cased first, then substituted."""
    if case_fold:
        line = line.lower()
    return apply_rules(rules, line)


def candidates(corpus: Sequence[str],
               rules: Optional[SubstitutionRuleSet] = None,
               case_fold: bool = False) -> List[str]:
    return [normalize(line, rules, case_fold) for line in corpus]


def distances(query: str, cands: Sequence[str], distance_fn: DistanceFn = levenshtein) -> List[int]:
    return [distance_fn(query, c) for c in cands]


def paired_sort(dists: Sequence[int], reverse: bool = False) -> List[int]:
    """Index permutation ordering dists; ties keep original index order either way."""
    if reverse:
        return sorted(range(len(dists)), key=lambda i: (-dists[i], i))
    return sorted(range(len(dists)), key=lambda i: (dists[i], i))


def scale(distance: int, max_distance: int) -> float:
    # Every candidate matched exactly: all share the top score.
    if max_distance == 0:
        return 1.0
    return 1.0 - (distance / max_distance)


def rank(query: str,
         corpus: Sequence[str],
         rules: Optional[SubstitutionRuleSet] = None,
         case_fold: bool = False,
         reverse: bool = False,
         scaled: bool = False,
         distance_fn: DistanceFn = levenshtein) -> Ranking:
    """Rank corpus lines by edit distance to query.

    Records carry the original line text; case folding and substitutions only
    affect the strings that are scored. Scaling uses the numeric maximum of
    all distances, so it does not depend on sort direction.
    """
    if case_fold:
        query = query.lower()
    if not corpus:
        return Ranking(scaled=scaled)

    dists = distances(query, candidates(corpus, rules, case_fold), distance_fn)
    order = paired_sort(dists, reverse=reverse)
    lo, hi = min(dists), max(dists)
    if scaled and hi == 0:
        debug("all distances are zero; every scaled score is 1.0")

    records: List[RankedRecord] = []
    for i in order:
        score = scale(dists[i], hi) if scaled else None
        records.append(RankedRecord(distance=dists[i], line=corpus[i], index=i, score=score))
    return Ranking(records=records, min_distance=lo, max_distance=hi, scaled=scaled)
