import asyncio
import logging

from flask import Flask, request, jsonify

from correcteur.config import load_settings
from correcteur.grammar_correction.errors import CorrectionError
from correcteur.grammar_correction.formatting import render_highlights, text_stats
from correcteur.grammar_correction.languagetool_client import LanguageToolClient
from correcteur.grammar_correction.models import CorrectionOptions
from correcteur.grammar_correction.service import correct


# ----------------------------
# Config
# ----------------------------

settings = load_settings()

logging.basicConfig(level=getattr(logging, settings.log_level, logging.INFO))

DEFAULT_OPTIONS = CorrectionOptions(confidence_threshold=settings.confidence_threshold)


def create_app(client=None) -> Flask:
    app = Flask(__name__)
    app.config["LT_CLIENT"] = client or LanguageToolClient(
        url=settings.languagetool_url,
        language=settings.language,
        timeout=settings.timeout,
    )

    # ----------------------------
    # Routes
    # ----------------------------

    @app.get("/health")
    def health():
        return jsonify({"ok": True, "status": "healthy"})

    @app.post("/correct")
    def correct_text():
        data = request.get_json(silent=True) or {}
        text = data.get("text")
        if not isinstance(text, str) or not text.strip():
            return jsonify({"ok": False, "error": "No text provided"}), 400

        try:
            options = CorrectionOptions.from_dict(data.get("options"), defaults=DEFAULT_OPTIONS)
        except ValueError as e:
            return jsonify({"ok": False, "error": str(e)}), 400

        try:
            result = asyncio.run(correct(text, options, client=app.config["LT_CLIENT"]))
        except CorrectionError:
            # Original text stays with the caller untouched
            return jsonify({"ok": False, "error": "Correction failed"}), 502

        highlighted = None
        applied = None
        if result.applied_edits is not None:
            applied = [
                {"original": p.original, "replacement": p.replacement, "position": p.position}
                for p in result.applied_edits
            ]
            if result.applied_edits:
                highlighted = str(render_highlights(result, settings.highlight_class))

        return jsonify({
            "ok": True,
            "corrected_text": result.text,
            "highlighted_html": highlighted,
            "applied_edits": applied,
            "stats": {
                "original": text_stats(text).to_dict(),
                "corrected": text_stats(result.text).to_dict(),
            },
        })

    return app


app = create_app()


if __name__ == "__main__":
    app.run(debug=True, port=5000)
