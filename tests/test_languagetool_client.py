import pytest
import requests

from correcteur.grammar_correction import languagetool_client
from correcteur.grammar_correction.errors import ProviderFailure
from correcteur.grammar_correction.languagetool_client import LanguageToolClient


class FakeResponse:
    def __init__(self, payload=None, status=200, bad_json=False):
        self.payload = payload
        self.status = status
        self.bad_json = bad_json

    def raise_for_status(self):
        if self.status >= 400:
            raise requests.HTTPError(f"{self.status} error")

    def json(self):
        if self.bad_json:
            raise ValueError("not json")
        return self.payload


def patch_post(monkeypatch, response=None, error=None):
    calls = []

    def fake_post(url, data=None, headers=None, timeout=None):
        calls.append({"url": url, "data": data, "headers": headers, "timeout": timeout})
        if error is not None:
            raise error
        return response

    monkeypatch.setattr(languagetool_client.requests, "post", fake_post)
    return calls


def test_check_sends_rule_configuration(monkeypatch, make_match):
    calls = patch_post(monkeypatch, FakeResponse({"matches": [make_match(0, 2)]}))

    matches = LanguageToolClient(url="http://lt.local/v2/check", timeout=5).check("Il va")

    assert len(matches) == 1
    sent = calls[0]
    assert sent["url"] == "http://lt.local/v2/check"
    assert sent["timeout"] == 5
    assert sent["data"]["text"] == "Il va"
    assert sent["data"]["language"] == "fr"
    assert sent["data"]["level"] == "picky"
    assert sent["data"]["enabledOnly"] == "false"
    assert sent["data"]["disabledRules"] == "WHITESPACE_RULE,EN_QUOTES"
    assert "FR_CONJUGATION_ERROR" in sent["data"]["enabledRules"].split(",")


def test_default_client_has_no_timeout(monkeypatch):
    calls = patch_post(monkeypatch, FakeResponse({"matches": []}))
    LanguageToolClient().check("texte")
    assert calls[0]["timeout"] is None


@pytest.mark.parametrize(
    "response,error",
    [
        (None, requests.ConnectionError("down")),
        (FakeResponse(status=500), None),
        (FakeResponse(bad_json=True), None),
        (FakeResponse({"software": {}}), None),
    ],
)
def test_failures_raise_provider_failure(monkeypatch, response, error):
    patch_post(monkeypatch, response, error)
    with pytest.raises(ProviderFailure):
        LanguageToolClient().check("texte")
