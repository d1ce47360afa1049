import pytest

from correcteur.grammar_correction.errors import ProviderFailure


def lt_match(offset, length, replacements=("x",), category="GRAMMAR", rule_id="RULE"):
    """Raw match shaped like the LanguageTool v2 /check response."""
    return {
        "offset": offset,
        "length": length,
        "message": "",
        "replacements": [{"value": r} for r in replacements],
        "rule": {"id": rule_id, "description": "", "category": {"id": category, "name": category}},
    }


class FakeClient:
    def __init__(self, matches=None, error=None):
        self.matches = matches or []
        self.error = error
        self.calls = []

    def check(self, text):
        self.calls.append(text)
        if self.error is not None:
            raise self.error
        return self.matches


@pytest.fixture
def make_match():
    return lt_match


@pytest.fixture
def fake_client():
    return FakeClient


@pytest.fixture
def failing_client():
    return FakeClient(error=ProviderFailure("LanguageTool request failed: boom"))
