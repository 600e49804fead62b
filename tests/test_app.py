import re

import pytest

from app import create_app
from commands import TEST_API_KEY

KEY_RE = re.compile(r"^ldp_live_[0-9a-f]{32}$")


@pytest.fixture
def app(settings, sheet, mailer):
    return create_app(settings, store=sheet, send=mailer)


@pytest.fixture
def client(app):
    return app.test_client()


# -- webhook ---------------------------------------------------------------
def test_submission_event_onboards_row(client, sheet, mailer):
    resp = client.post("/submissions", json={
        "row": 2,
        "values": ["2026-10-01 09:00", "a@x.com", "Ana Lopez", "", "Researcher", "", ""],
    })
    assert resp.status_code == 200
    assert resp.get_json() == {"row": 2, "outcome": "sent"}
    assert KEY_RE.match(sheet.get_cell(2, 8))
    assert sheet.get_cell(2, 9) == "Yes"
    assert "Hi Ana," in mailer.sent[0]["html"]


def test_duplicate_event_is_skipped(client, mailer):
    client.post("/submissions", json={"row": 3})
    resp = client.post("/submissions", json={"row": 3})
    assert resp.get_json()["outcome"] == "skipped"
    assert len(mailer.sent) == 1


@pytest.mark.parametrize("payload", [{}, {"row": "2"}, {"row": 1}, {"row": True},
                                     {"row": 2, "values": "a@x.com"}])
def test_bad_payload(client, payload, sheet):
    resp = client.post("/submissions", json=payload)
    assert resp.status_code == 400
    assert "error" in resp.get_json()
    assert sheet.writes == []


# -- CLI -------------------------------------------------------------------
def test_setup_sheet_command(app, sheet):
    runner = app.test_cli_runner()
    result = runner.invoke(args=["setup-sheet"])
    assert result.exit_code == 0
    assert "already present" in result.output

    sheet.grid[0] = sheet.grid[0][:7]
    result = runner.invoke(args=["setup-sheet"])
    assert "Added columns: API Key, Email Sent" in result.output
    assert sheet.grid[0][7:] == ["API Key", "Email Sent"]


def test_test_email_command_sends_sample(app, mailer):
    result = app.test_cli_runner().invoke(args=["test-email", "--to", "me@example.com"])
    assert result.exit_code == 0
    assert "Test email sent" in result.output
    (msg,) = mailer.sent
    assert msg["to"] == "me@example.com"
    assert TEST_API_KEY in msg["html"]
    assert "Hi Test," in msg["html"]
    assert "Testing the email system" in msg["html"]


def test_test_email_command_reports_failure(settings, sheet):
    from conftest import FakeMailer
    app = create_app(settings, store=sheet, send=FakeMailer(fail_for={"me@example.com"}))
    result = app.test_cli_runner().invoke(args=["test-email", "--to", "me@example.com"])
    assert result.exit_code != 0
    assert "failed to send" in result.output


def test_test_email_preview(app, mailer, tmp_path):
    out = tmp_path / "preview.html"
    result = app.test_cli_runner().invoke(args=["test-email", "--preview", str(out)])
    assert result.exit_code == 0
    assert TEST_API_KEY in out.read_text(encoding="utf-8")
    assert mailer.sent == []


def test_backfill_command(app, sheet, mailer):
    result = app.test_cli_runner().invoke(args=["backfill", "--delay", "0"])
    assert result.exit_code == 0
    assert "Processed 2 existing responses" in result.output
    assert len(mailer.sent) == 2
