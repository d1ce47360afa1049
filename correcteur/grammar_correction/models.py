from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Optional, Tuple

from .errors import MalformedMatch


class Category(str, Enum):
    GRAMMAR = "GRAMMAR"
    SPELLING = "SPELLING"
    TYPOS = "TYPOS"
    STYLE = "STYLE"
    OTHER = "OTHER"

    @classmethod
    def from_id(cls, value: Optional[str]) -> "Category":
        try:
            return cls(value or "")
        except (TypeError, ValueError):
            return cls.OTHER


@dataclass(frozen=True)
class CandidateEdit:
    offset: int
    length: int
    replacements: Tuple[str, ...]
    category: Category = Category.OTHER
    rule_id: str = ""
    message: str = ""

    @property
    def end(self) -> int:
        return self.offset + self.length

    @classmethod
    def from_match(cls, match: Mapping[str, Any], text_length: int) -> "CandidateEdit":
        """
        Build a CandidateEdit from one raw LanguageTool match.
        Raises MalformedMatch if the span does not fit inside the text.
        """
        if not isinstance(match, Mapping):
            raise MalformedMatch(f"match is not an object: {match!r}")

        offset = match.get("offset")
        length = match.get("length")
        if not isinstance(offset, int) or not isinstance(length, int):
            raise MalformedMatch(f"non-integer span: offset={offset!r} length={length!r}")
        if offset < 0 or length < 1 or offset + length > text_length:
            raise MalformedMatch(
                f"span [{offset}, {offset + length}) outside text of length {text_length}"
            )

        replacements = match.get("replacements")
        if replacements is None:
            replacements = []
        if not isinstance(replacements, list):
            raise MalformedMatch(f"replacements is not a list: {replacements!r}")

        values = []
        for r in replacements:
            value = r.get("value") if isinstance(r, Mapping) else r
            if isinstance(value, str):
                values.append(value)

        rule = match.get("rule")
        if rule is None:
            rule = {}
        if not isinstance(rule, Mapping):
            raise MalformedMatch(f"rule is not an object: {rule!r}")

        category = rule.get("category")
        if category is None:
            category = {}
        if not isinstance(category, Mapping):
            raise MalformedMatch(f"rule category is not an object: {category!r}")

        rule_id = rule.get("id")
        message = match.get("message")

        return cls(
            offset=offset,
            length=length,
            replacements=tuple(values),
            category=Category.from_id(category.get("id")),
            rule_id=rule_id if isinstance(rule_id, str) else "",
            message=message if isinstance(message, str) else "",
        )


# Transitively overlapping edits, ordered by offset
EditGroup = Tuple[CandidateEdit, ...]


@dataclass(frozen=True)
class ResolvedEdit:
    edit: CandidateEdit
    original: str
    replacement: str

    @property
    def offset(self) -> int:
        return self.edit.offset

    @property
    def length(self) -> int:
        return self.edit.length


@dataclass(frozen=True)
class AppliedEdit:
    original: str
    replacement: str
    position: int  # start of `replacement` in the corrected text


@dataclass(frozen=True)
class CorrectionResult:
    text: str
    applied_edits: Optional[Tuple[AppliedEdit, ...]] = None


_OPTION_KEYS = {
    "confidence_threshold": ("confidence_threshold", "confidenceThreshold"),
    "context_aware": ("context_aware", "contextAware"),
    "preserve_capitalization": ("preserve_capitalization", "preserveCapitalization"),
    "highlight_corrections": ("highlight_corrections", "highlightCorrections"),
}


@dataclass(frozen=True)
class CorrectionOptions:
    confidence_threshold: float = 0.0
    context_aware: bool = True
    preserve_capitalization: bool = True
    highlight_corrections: bool = False

    def __post_init__(self) -> None:
        if not 0.0 <= self.confidence_threshold <= 1.0:
            raise ValueError(
                f"confidence_threshold must be within [0, 1], got {self.confidence_threshold}"
            )

    @classmethod
    def from_dict(
        cls, data: Optional[Mapping[str, Any]], defaults: Optional["CorrectionOptions"] = None
    ) -> "CorrectionOptions":
        """Accepts snake_case keys and the camelCase keys the web UI sends."""
        if data is not None and not isinstance(data, Mapping):
            raise ValueError("options must be an object")

        base = defaults or cls()
        values = {
            "confidence_threshold": base.confidence_threshold,
            "context_aware": base.context_aware,
            "preserve_capitalization": base.preserve_capitalization,
            "highlight_corrections": base.highlight_corrections,
        }
        for field, keys in _OPTION_KEYS.items():
            for key in keys:
                if data is not None and data.get(key) is not None:
                    values[field] = data[key]
                    break

        try:
            threshold = float(values["confidence_threshold"])
        except (TypeError, ValueError):
            raise ValueError(
                f"confidence_threshold must be a number, got {values['confidence_threshold']!r}"
            ) from None

        for field in ("context_aware", "preserve_capitalization", "highlight_corrections"):
            if not isinstance(values[field], bool):
                raise ValueError(f"{field} must be true or false, got {values[field]!r}")

        return cls(
            confidence_threshold=threshold,
            context_aware=values["context_aware"],
            preserve_capitalization=values["preserve_capitalization"],
            highlight_corrections=values["highlight_corrections"],
        )
