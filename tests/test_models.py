from config import Columns, Settings, load_settings
from models import SubmissionRecord


def test_from_values_applies_defaults():
    record = SubmissionRecord.from_values(
        ["2026-10-01", "a@x.com", "Ana Lopez", "", "Researcher", "  ", None], Columns())
    assert record.organization == "Independent"
    assert record.use_case == "Not specified"
    assert record.source == "Not specified"
    assert record.role == "Researcher"
    assert record.api_key == ""
    assert record.email_sent == ""


def test_from_values_pads_short_rows():
    record = SubmissionRecord.from_values(["2026-10-01", "a@x.com"], Columns())
    assert record.name == ""
    assert record.first_name == ""
    assert record.organization == "Independent"


def test_from_values_strips_and_keeps_given_values():
    record = SubmissionRecord.from_values(
        ["t", " b@y.com ", "Ben  Ode", "Moonworks", "Engineer", "Rovers", "Twitter",
         "ldp_live_abc", "Yes"], Columns())
    assert record.email == "b@y.com"
    assert record.first_name == "Ben"
    assert record.organization == "Moonworks"
    assert record.source == "Twitter"
    assert record.api_key == "ldp_live_abc"
    assert record.email_sent == "Yes"


def test_load_settings_reads_environment(monkeypatch):
    monkeypatch.setenv("SPREADSHEET_ID", "sheet-xyz")
    monkeypatch.setenv("SMTP_PORT", "587")
    monkeypatch.setenv("ADMIN_EMAIL", "")
    settings = load_settings()
    assert settings.spreadsheet_id == "sheet-xyz"
    assert settings.smtp_port == 587
    assert settings.admin_email is None
    assert settings.api_base_url == "https://api.lunarlanding.space"
    assert settings.columns.api_key == 7
    assert settings.columns.email_sent == 8


def test_default_column_layout():
    assert Settings().columns == Columns(0, 1, 2, 3, 4, 5, 6, 7, 8)
