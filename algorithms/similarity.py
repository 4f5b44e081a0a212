"""
Similarity scoring on top of the LCS length.

ratio(a, b) = lcs_length(a, b) / max(len(a), len(b)), and 1.0 for two empty
strings. Strings are compared code point by code point, with no Unicode
normalization.

Batch helpers return None (never raise) when there are no candidates.
"""

from typing import Iterable, List, NamedTuple, Optional

from algorithms.lcs import lcs_length


class Match(NamedTuple):
    candidate: str
    ratio: float


def compare_similarity(a: str, b: str) -> float:
    size = max(len(a), len(b))
    if size == 0:
        return 1.0
    return lcs_length(a, b) / size


def find_best_similarity(target: str, candidates: Iterable[str]) -> Optional[Match]:
    """First candidate with the highest ratio, or None if there are none."""
    best: Optional[Match] = None
    for cand in candidates:
        score = compare_similarity(target, cand)
        if best is None or score > best.ratio:
            best = Match(cand, score)
    return best


def get_similarity_ratings(target: str, candidates: Iterable[str]) -> Optional[List[float]]:
    """Ratios index-aligned with `candidates`, or None if there are none."""
    ratings = [compare_similarity(target, c) for c in candidates]
    return ratings or None


def rank_similarities(target: str, candidates: Iterable[str]) -> Optional[List[Match]]:
    """
    All candidates ordered by descending ratio.
    Equal ratios keep their input order, so ranking[0] is the same pick
    find_best_similarity makes.
    """
    cands = list(candidates)
    ratings = get_similarity_ratings(target, cands)
    if ratings is None:
        return None
    ranked = [Match(c, r) for c, r in zip(cands, ratings)]
    ranked.sort(key=lambda m: -m.ratio)
    return ranked
