from correcteur.grammar_correction.formatting import render_highlights, text_stats
from correcteur.grammar_correction.models import AppliedEdit, CorrectionResult


def test_replacement_is_wrapped_at_its_position():
    result = CorrectionResult("Je vais au marché", (AppliedEdit("marcher", "marché", 11),))

    html = render_highlights(result)

    assert html == 'Je vais au <span class="correction-highlight">marché</span>'


def test_several_markers_keep_their_positions():
    result = CorrectionResult(
        "AAA bb c",
        (AppliedEdit("a", "AAA", 0), AppliedEdit("ccc", "c", 7)),
    )

    html = render_highlights(result, css_class="hl")

    assert html == '<span class="hl">AAA</span> bb <span class="hl">c</span>'


def test_markup_is_escaped():
    result = CorrectionResult("<b> & x", (AppliedEdit("y", "x", 6),))

    html = render_highlights(result, css_class="hl")

    assert html == '&lt;b&gt; &amp; <span class="hl">x</span>'


def test_result_without_edits_renders_plain_text():
    assert render_highlights(CorrectionResult("a < b")) == "a &lt; b"


def test_stats_of_blank_text():
    stats = text_stats("   ")
    assert (stats.characters, stats.words, stats.sentences) == (3, 0, 0)


def test_stats_count_words_and_sentences():
    stats = text_stats("Bonjour. Ça va? Oui")
    assert stats.to_dict() == {"characters": 19, "words": 4, "sentences": 3}
