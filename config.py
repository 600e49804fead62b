# config.py
"""
Settings for the beta onboarding automation.

Static product settings live here as constants; secrets and deployment
values come from the environment (.env on a VM, the host's env elsewhere).
Call load_settings() once at startup and hand the result to each component.
"""

import logging
import os
from typing import NamedTuple, Optional

from dotenv import load_dotenv

# ── static product settings ───────────────────────────────────────────────────
API_BASE_URL = "https://api.lunarlanding.space"
FROM_NAME    = "Lunar Landing API Team"
SUPPORT_EMAIL = "info@irisdatalabs.com"
COMPANY_NAME  = "Iris Data Labs"

API_KEY_HEADER    = "API Key"
EMAIL_SENT_HEADER = "Email Sent"

BACKFILL_DELAY = 1.0  # seconds between sends
SHEETS_WRITES_PER_MINUTE = 60  # default per-user quota of the Sheets API


class Columns(NamedTuple):
    """0-based positions of each field in a response row."""
    timestamp: int    = 0
    email: int        = 1
    name: int         = 2
    organization: int = 3
    role: int         = 4
    use_case: int     = 5
    source: int       = 6
    api_key: int      = 7
    email_sent: int   = 8


class Settings(NamedTuple):
    api_base_url: str = API_BASE_URL
    from_name: str    = FROM_NAME
    support_email: str = SUPPORT_EMAIL
    company_name: str = COMPANY_NAME
    columns: Columns  = Columns()
    backfill_delay: float = BACKFILL_DELAY
    sheets_write_interval: float = 60.0 / SHEETS_WRITES_PER_MINUTE

    # Google Sheets
    service_account_json: Optional[str] = None
    spreadsheet_id: Optional[str]       = None
    sheet_name: str                     = "Form Responses 1"

    # SMTP
    email_address: Optional[str]  = None
    email_password: Optional[str] = None
    smtp_host: str = "smtp.gmail.com"
    smtp_port: int = 465

    admin_email: Optional[str] = None


def load_settings():
    """Build Settings from the environment (after reading .env)."""
    load_dotenv()
    return Settings(
        service_account_json=os.getenv("SERVICE_ACCOUNT_JSON"),
        spreadsheet_id=os.getenv("SPREADSHEET_ID"),
        sheet_name=os.getenv("SHEET_NAME", "Form Responses 1"),
        email_address=os.getenv("EMAIL_ADDRESS"),
        email_password=os.getenv("EMAIL_PASSWORD"),
        smtp_host=os.getenv("SMTP_HOST", "smtp.gmail.com"),
        smtp_port=int(os.getenv("SMTP_PORT", "465")),
        admin_email=os.getenv("ADMIN_EMAIL") or None,
    )


def configure_logging():
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
