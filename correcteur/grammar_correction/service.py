import asyncio
import logging
from typing import Iterable, List, Optional

from .capitalization import preserve_capitalization
from .confidence import estimate_confidence
from .errors import CorrectionError, MalformedMatch, ProviderFailure
from .grouping import group_overlapping
from .languagetool_client import LanguageToolClient
from .models import CandidateEdit, CorrectionOptions, CorrectionResult, EditGroup, ResolvedEdit
from .selection import select_best
from .splicer import apply_edits

logger = logging.getLogger(__name__)


def parse_matches(text: str, matches: Iterable[dict]) -> List[CandidateEdit]:
    """Convert raw matches, dropping the ones whose span does not fit the text."""
    edits = []
    for m in matches:
        try:
            edits.append(CandidateEdit.from_match(m, len(text)))
        except MalformedMatch as e:
            logger.warning("Skipping malformed match: %s", e)
    return edits


def resolve_groups(text: str, groups: Iterable[EditGroup], options: CorrectionOptions) -> List[ResolvedEdit]:
    resolved = []
    for group in groups:
        best = select_best(group, options.context_aware)

        if not best.replacements:
            continue
        if estimate_confidence(best) < options.confidence_threshold:
            continue

        original = text[best.offset:best.end]
        replacement = best.replacements[0]
        if options.preserve_capitalization:
            replacement = preserve_capitalization(original, replacement)

        resolved.append(ResolvedEdit(edit=best, original=original, replacement=replacement))
    return resolved


def merge_corrections(text: str, matches: Iterable[dict], options: Optional[CorrectionOptions] = None) -> CorrectionResult:
    """Apply provider matches to text without calling the provider."""
    options = options or CorrectionOptions()
    edits = parse_matches(text, matches)
    resolved = resolve_groups(text, group_overlapping(edits), options)
    return apply_edits(text, resolved, highlight=options.highlight_corrections)


async def correct(
    text: str,
    options: Optional[CorrectionOptions] = None,
    *,
    client: Optional[LanguageToolClient] = None,
) -> CorrectionResult:
    """
    Check text with LanguageTool and return the corrected version.
    Blank text is returned as is without calling the provider.
    Raises CorrectionError if the provider call fails.
    """
    options = options or CorrectionOptions()

    if not text or not text.strip():
        return CorrectionResult(text=text or "", applied_edits=() if options.highlight_corrections else None)

    client = client or LanguageToolClient()

    try:
        matches = await asyncio.to_thread(client.check, text)
    except ProviderFailure as e:
        logger.exception("Correction request failed")
        raise CorrectionError("Correction failed") from e

    result = merge_corrections(text, matches, options)
    logger.info(
        "Corrected %d chars: %d matches, length delta %+d",
        len(text), len(matches), len(result.text) - len(text),
    )
    return result
