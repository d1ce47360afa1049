from typing import Iterable, List

from .models import CandidateEdit, EditGroup


def group_overlapping(edits: Iterable[CandidateEdit]) -> List[EditGroup]:
    """
    Partition edits into groups of transitively overlapping spans.

    Groups come back ordered by start offset. An edit starting exactly where
    the current group ends still joins it; only a strictly later offset opens
    a new group.
    """
    groups: List[EditGroup] = []
    current: List[CandidateEdit] = []
    current_end = -1

    for edit in sorted(edits, key=lambda e: e.offset):
        if edit.offset > current_end:
            if current:
                groups.append(tuple(current))
            current = [edit]
            current_end = edit.end
        else:
            current.append(edit)
            current_end = max(current_end, edit.end)

    if current:
        groups.append(tuple(current))

    return groups
