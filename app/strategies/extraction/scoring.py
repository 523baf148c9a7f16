"""Relevance scoring for currency candidates.

Campaign pages show goals, suggested donations and prices next to the
running total, so the largest number is not always the right one. Each
candidate is scored from the keywords around it and from its magnitude.
"""

import dataclasses
import re

from app.interfaces.selector import Candidate

# (pattern, weight) applied to the case-folded context window
KEYWORD_WEIGHTS: tuple[tuple[re.Pattern[str], float], ...] = (
    (re.compile(r"\braised\b"), 8.0),
    (re.compile(r"donate"), 6.0),
    (re.compile(r"total"), 4.0),
    (re.compile(r"goal"), 2.0),
    (re.compile(r"progress"), 2.0),
    (re.compile(r"campaign"), 2.0),
)


def score_candidate(value: float, context: str) -> float:
    """Score one amount from its value and surrounding text.

    Args:
        value: Parsed amount.
        context: Case-folded text window around the amount.

    Returns:
        Additive relevance score; higher is more likely the amount raised.
    """
    score = 0.0
    for pattern, weight in KEYWORD_WEIGHTS:
        if pattern.search(context):
            score += weight

    if value < 100:
        score -= 12
    elif value < 1_000:
        score -= 4
    if value >= 10_000:
        score += 5
    if value >= 50_000:
        score += 3

    return score


def rank_candidates(candidates: list[Candidate]) -> list[Candidate]:
    """Attach scores and order candidates best first.

    Ties on score go to the larger amount.
    """
    scored = [
        dataclasses.replace(c, score=score_candidate(c.value, c.context))
        for c in candidates
    ]
    scored.sort(key=lambda c: (c.score, c.value), reverse=True)
    return scored
