# tasks.py
"""
Onboarding work for one response row, plus the manual sweeps.

Flow per row:
1) Row already has an API key → skip (no writes, no email)
2) Generate a key and write it to the row
3) Compose and send the welcome email
4) Write the send outcome ("Yes" / "Failed") to the row
"""

import enum
import logging
import time

from markupsafe import escape

import config
from email_template import compose
from keygen import generate_key, mask_key
from models import SubmissionRecord
from store import is_blank

logger = logging.getLogger(__name__)

SENT   = "Yes"
FAILED = "Failed"


class Outcome(enum.Enum):
    SKIPPED = "skipped"
    SENT    = "sent"
    FAILED  = "failed"
    ERROR   = "error"


# ------------------------------------------------------------------------
def process_submission(store, row, settings, send, values=None, from_store=False):
    """
    Issue a key and send the welcome email for the response in `row`.

    `values` are the ordered cell values delivered with a submission event;
    without them the record is read back from the store. With `from_store`,
    `values` were just read from the store and also serve the key check,
    so no further read is made. Never raises: an unexpected error is logged
    and reported as Outcome.ERROR.
    """
    cols = settings.columns
    try:
        # -- 1 ▸ idempotence guard ------------------------------------------
        if from_store:
            existing = values[cols.api_key] if cols.api_key < len(values) else ""
        else:
            existing = store.get_cell(row, cols.api_key + 1)
        if not is_blank(existing):
            logger.debug("Row %s already has an API key. Skipping.", row)
            return Outcome.SKIPPED

        if values is None:
            values = store.row_values(row, len(cols))
        user = SubmissionRecord.from_values(values, cols)
        logger.info("New beta user: %s (row %s)", user.email, row)

        # -- 2 ▸ issue the key; written before any email goes out -----------
        api_key = generate_key()
        store.set_cell(row, cols.api_key + 1, api_key)
        logger.info("Generated API key %s", mask_key(api_key))

        # -- 3 ▸ email the user --------------------------------------------
        email = compose(user, api_key, settings)
        result = send(user.email, email.subject, email.html_body,
                      settings.from_name, email.text_body)

        # -- 4 ▸ record the real outcome -----------------------------------
        store.set_cell(row, cols.email_sent + 1, SENT if result.ok else FAILED)

    except Exception as exc:
        logger.exception("❌ Error processing row %s", row)
        _notify_admin(settings, send, row, exc)
        return Outcome.ERROR

    if result.ok:
        logger.info("✅ Beta onboarding completed for: %s", user.email)
        return Outcome.SENT
    logger.warning("⚠️ Email failed to send for %s: %s", user.email, result.reason)
    return Outcome.FAILED


def _notify_admin(settings, send, row, exc):
    if not settings.admin_email:
        return
    body = f"<p>Onboarding failed for row {row}:</p><pre>{escape(repr(exc))}</pre>"
    try:
        result = send(settings.admin_email, "Beta Signup Error", body,
                      settings.from_name, f"Onboarding failed for row {row}: {exc!r}")
    except Exception:
        logger.exception("Admin notification for row %s could not be sent", row)
        return
    if not result.ok:
        logger.warning("Admin notification failed: %s", result.reason)


# ------------------------------------------------------------------------
def run_backfill(store, settings, send, sleep=time.sleep):
    """
    Onboard every stored response that has no API key yet, one row at a
    time, pausing between sends. Returns the number of rows processed.
    """
    # one read for the whole sweep; per row only the two writes remain
    rows = store.rows(len(settings.columns))
    logger.info("Processing existing responses (rows 2-%s)...", len(rows))

    processed = errors = 0
    for row, values in enumerate(rows[1:], start=2):  # row 1 is the header
        outcome = process_submission(store, row, settings, send, values, from_store=True)
        if outcome is Outcome.SKIPPED:
            continue
        if outcome in (Outcome.SENT, Outcome.FAILED):
            processed += 1
            logger.info("Processed row %s (%s)", row, outcome.value)
        elif outcome is Outcome.ERROR:
            errors += 1

        # stay under the mail provider's rate limit
        sleep(settings.backfill_delay)

    logger.info("✅ Processed %s existing responses (%s errors)", processed, errors)
    return processed


# ------------------------------------------------------------------------
def ensure_schema(store, settings):
    """Add the "API Key" / "Email Sent" headers if missing. Safe to re-run."""
    cols = settings.columns
    added = []
    for col, label in ((cols.api_key + 1, config.API_KEY_HEADER),
                       (cols.email_sent + 1, config.EMAIL_SENT_HEADER)):
        if is_blank(store.get_cell(1, col)):
            store.set_cell(1, col, label)
            added.append(label)
            logger.info('✅ Added "%s" column', label)
    return added
