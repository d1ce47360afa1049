from typing import Iterable, List, Optional

from .models import AppliedEdit, CorrectionResult, ResolvedEdit


def apply_edits(text: str, edits: Iterable[ResolvedEdit], highlight: bool = False) -> CorrectionResult:
    """
    Splice resolved edits into text.

    Edits must not overlap in the original text. They are applied left to
    right while keeping a running length delta, so the position of each
    replacement in the corrected text is offset + delta of the edits before
    it. Highlight triples are only collected when `highlight` is set.
    """
    pieces: List[str] = []
    applied: Optional[List[AppliedEdit]] = [] if highlight else None
    cursor = 0
    delta = 0

    for edit in sorted(edits, key=lambda e: e.offset):
        if edit.offset < cursor:
            raise ValueError(
                f"edit at {edit.offset} overlaps a previous edit ending at {cursor}"
            )

        pieces.append(text[cursor:edit.offset])
        pieces.append(edit.replacement)

        if applied is not None:
            applied.append(AppliedEdit(edit.original, edit.replacement, edit.offset + delta))

        delta += len(edit.replacement) - edit.length
        cursor = edit.offset + edit.length

    pieces.append(text[cursor:])

    return CorrectionResult(
        text="".join(pieces),
        applied_edits=tuple(applied) if applied is not None else None,
    )
