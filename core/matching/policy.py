#!/usr/bin/env python3
"""
Result Policy - post-ranking filtering and truncation.

Ranking itself is policy-free; call sites decide how many candidates to
show and which minimums apply.
"""

from typing import List, Optional

from core.config_loader import ResultPolicy
from core.matching.models import WorkerMatchScore


def apply_result_policy(
    scores: List[WorkerMatchScore],
    policy: Optional[ResultPolicy]
) -> List[WorkerMatchScore]:
    """Apply ResultPolicy to ranked scores.

    Args:
        scores: Scores already sorted by final_score
        policy: ResultPolicy to apply, or None for no filtering

    Returns:
        Scores strictly above both minimums, truncated to top_k
    """
    if policy is None:
        return scores

    filtered = [
        s for s in scores
        if s.skill_overlap > policy.min_skill_overlap
        and s.availability_coverage > policy.min_availability_coverage
    ]

    return filtered[:policy.top_k]
