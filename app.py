# app.py
from flask import Flask, current_app, jsonify, request

import config
from commands import register_commands
from email_sender import smtp_sender
from google_sheets import GoogleSheetStore
from tasks import process_submission


class Onboarding:
    """Settings plus the storage and mail collaborators, built once per app."""

    def __init__(self, settings, store=None, send=None):
        self.settings = settings
        self._store = store
        self.send = send or smtp_sender(settings)

    @property
    def store(self):
        # the sheet adapter checks its settings on first use
        if self._store is None:
            self._store = GoogleSheetStore(self.settings)
        return self._store


# ── Flask setup ────────────────────────────────────────────────────────────────
def create_app(settings=None, store=None, send=None):
    config.configure_logging()
    app = Flask(__name__)
    app.extensions["onboarding"] = Onboarding(settings or config.load_settings(), store, send)
    register_commands(app)

    # ── Route: "submission created" event from the form/sheet integration ──────
    @app.route("/submissions", methods=["POST"])
    def submission_created():
        payload = request.get_json(silent=True) or {}
        row = payload.get("row")
        values = payload.get("values")

        if not isinstance(row, int) or isinstance(row, bool) or row < 2:
            return jsonify(error="'row' must be a data row number (>= 2)"), 400
        if values is not None and not isinstance(values, list):
            return jsonify(error="'values' must be a list"), 400

        ob = current_app.extensions["onboarding"]
        outcome = process_submission(ob.store, row, ob.settings, ob.send, values)
        return jsonify(row=row, outcome=outcome.value)

    return app


# ── Local run helper (ignored by Gunicorn) ────────────────────────────────────
if __name__ == "__main__":
    create_app().run(debug=True)
