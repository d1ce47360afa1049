import re
from dataclasses import asdict, dataclass

from markupsafe import Markup, escape

from .models import CorrectionResult

DEFAULT_HIGHLIGHT_CLASS = "correction-highlight"

_SENTENCE_END = re.compile(r"[.!?]+\s")


@dataclass(frozen=True)
class TextStats:
    characters: int
    words: int
    sentences: int

    def to_dict(self) -> dict:
        return asdict(self)


def text_stats(text: str) -> TextStats:
    if not text or not text.strip():
        return TextStats(characters=len(text or ""), words=0, sentences=0)

    words = len(text.split())
    sentences = len([s for s in _SENTENCE_END.split(text) if s])
    return TextStats(characters=len(text), words=words, sentences=sentences)


def render_highlights(result: CorrectionResult, css_class: str = DEFAULT_HIGHLIGHT_CLASS) -> Markup:
    """
    Wrap every applied replacement of result.text in a <span>.
    Markers go in from the last position to the first so earlier positions
    stay valid; everything is HTML-escaped.
    """
    text = result.text
    parts = sorted(result.applied_edits or (), key=lambda p: p.position, reverse=True)

    html = []
    cursor = len(text)
    for part in parts:
        end = part.position + len(part.replacement)
        if end > cursor:
            # Overlaps a marker already placed; leave it plain
            continue
        html.append(escape(text[end:cursor]))
        html.append(Markup('<span class="{}">{}</span>').format(css_class, text[part.position:end]))
        cursor = part.position

    html.append(escape(text[:cursor]))
    return Markup("").join(reversed(html))
