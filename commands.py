# commands.py
"""
Operator commands, run by hand through the Flask CLI:

    flask --app "app:create_app()" setup-sheet
    flask --app "app:create_app()" test-email --to you@example.com
    flask --app "app:create_app()" backfill
"""

from pathlib import Path

import click
from flask import current_app

from email_template import compose
from models import SubmissionRecord
from tasks import ensure_schema, run_backfill

TEST_API_KEY = "ldp_test_1234567890abcdef1234567890abcdef"


def sample_user(email):
    return SubmissionRecord(
        timestamp="",
        email=email,
        name="Test User",
        organization="Test Organization",
        role="Developer",
        use_case="Testing the email system",
    )


def register_commands(app):

    @app.cli.command("setup-sheet")
    def setup_sheet():
        """Add the API Key / Email Sent header columns if missing."""
        ob = current_app.extensions["onboarding"]
        added = ensure_schema(ob.store, ob.settings)
        if added:
            click.echo("✅ Added columns: " + ", ".join(added))
        else:
            click.echo("✅ Columns already present, nothing to do.")
        click.echo("Next: point the form's submit trigger at POST /submissions.")

    @app.cli.command("test-email")
    @click.option("--to", "to", default="your-email@example.com",
                  help="Recipient of the test message.")
    @click.option("--preview", type=click.Path(dir_okay=False, writable=True),
                  help="Write the HTML to this file instead of sending.")
    def test_email(to, preview):
        """Send (or preview) the welcome email with sample data."""
        ob = current_app.extensions["onboarding"]
        email = compose(sample_user(to), TEST_API_KEY, ob.settings)

        if preview:
            Path(preview).write_text(email.html_body, encoding="utf-8")
            click.echo(f"📄 Preview written to {preview}")
            return

        click.echo(f"📧 Sending test email to: {to}")
        result = ob.send(to, email.subject, email.html_body,
                         ob.settings.from_name, email.text_body)
        if not result.ok:
            raise click.ClickException(f"Test email failed to send: {result.reason}")
        click.echo("✅ Test email sent! Check your inbox.")

    @app.cli.command("backfill")
    @click.option("--delay", type=float, default=None,
                  help="Seconds to wait between sends.")
    def backfill(delay):
        """Onboard existing responses that have no API key yet."""
        ob = current_app.extensions["onboarding"]
        settings = ob.settings
        if delay is not None:
            settings = settings._replace(backfill_delay=delay)
        processed = run_backfill(ob.store, settings, ob.send)
        click.echo(f"✅ Processed {processed} existing responses")
