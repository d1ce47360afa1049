from .models import CandidateEdit, Category

BASE_CONFIDENCE = 0.5
GRAMMAR_BONUS = 0.2
TYPOS_BONUS = 0.15
PER_ALTERNATIVE_PENALTY = 0.03
MAX_ALTERNATIVE_PENALTY = 0.3
LONG_SPAN_BONUS = 0.1
LONG_SPAN_MIN = 3  # spans strictly longer than this get the bonus


def estimate_confidence(edit: CandidateEdit) -> float:
    """
    Heuristic confidence in [0, 1] for a single edit.
    Fewer alternatives, grammar/typo categories and longer spans score higher.
    An edit without any replacement scores 0.
    """
    if not edit.replacements:
        return 0.0

    confidence = BASE_CONFIDENCE

    # Independent checks, not an elif chain
    if edit.category is Category.GRAMMAR:
        confidence += GRAMMAR_BONUS
    if edit.category is Category.TYPOS:
        confidence += TYPOS_BONUS

    confidence -= min(MAX_ALTERNATIVE_PENALTY, len(edit.replacements) * PER_ALTERNATIVE_PENALTY)

    if edit.length > LONG_SPAN_MIN:
        confidence += LONG_SPAN_BONUS

    return min(1.0, max(0.0, confidence))
