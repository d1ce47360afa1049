from functools import reduce

from .confidence import estimate_confidence
from .models import CandidateEdit, Category, EditGroup


def _prefer(best: CandidateEdit, current: CandidateEdit, context_aware: bool) -> CandidateEdit:
    # Grammar issues win over style/spelling suggestions
    if current.category is Category.GRAMMAR and best.category is not Category.GRAMMAR:
        return current

    if context_aware and current.replacements and best.replacements:
        if estimate_confidence(current) > estimate_confidence(best):
            return current

    # Longer span, incumbent keeps ties
    return current if current.length > best.length else best


def select_best(group: EditGroup, context_aware: bool = True) -> CandidateEdit:
    """Pick the single edit that represents an overlapping group."""
    if not group:
        raise ValueError("cannot select from an empty group")
    if len(group) == 1:
        return group[0]

    return reduce(lambda best, current: _prefer(best, current, context_aware), group[1:], group[0])
