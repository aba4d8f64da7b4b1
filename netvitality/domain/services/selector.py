"""
Selector

Picks every node achieving the minimum vitality score.
"""

from typing import Dict, List, Optional, Tuple


def select_minimum(scores: Dict[str, int]) -> Tuple[Optional[int], List[str]]:
    """
    Return the minimum score and all names reaching it, sorted by name.

    An empty table yields ``(None, [])``.
    """
    if not scores:
        return None, []
    minimum = min(scores.values())
    return minimum, sorted(name for name, score in scores.items() if score == minimum)
