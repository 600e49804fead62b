import pytest

from config import Settings
from email_sender import SendResult
from store import RowStore, check_coordinates

HEADERS = ["Timestamp", "Email Address", "Name", "Organization", "Role",
           "Use Case", "How did you hear about us?"]


class MemoryStore(RowStore):
    """List-of-lists sheet; records every write."""

    def __init__(self, rows=None):
        self.grid = [list(r) for r in (rows or [])]
        self.writes = []

    def get_cell(self, row, col):
        check_coordinates(row, col)
        if row > len(self.grid) or col > len(self.grid[row - 1]):
            return ""
        return self.grid[row - 1][col - 1]

    def set_cell(self, row, col, value):
        check_coordinates(row, col)
        while len(self.grid) < row:
            self.grid.append([])
        cells = self.grid[row - 1]
        while len(cells) < col:
            cells.append("")
        cells[col - 1] = value
        self.writes.append((row, col, value))

    def row_count(self):
        return len(self.grid)

    def column_count(self):
        return max((len(r) for r in self.grid), default=0)


class FakeMailer:
    """Stands in for the SMTP sender; fails for addresses in `fail_for`."""

    def __init__(self, fail_for=()):
        self.fail_for = set(fail_for)
        self.sent = []

    def __call__(self, to, subject, html_body, from_name, text_body=None):
        self.sent.append({"to": to, "subject": subject, "html": html_body,
                          "from_name": from_name, "text": text_body})
        if to in self.fail_for:
            return SendResult(False, "550 mailbox unavailable")
        return SendResult(True)


@pytest.fixture
def settings():
    return Settings(spreadsheet_id="sheet-123", backfill_delay=0)


@pytest.fixture
def mailer():
    return FakeMailer()


@pytest.fixture
def sheet():
    return MemoryStore([
        HEADERS + ["API Key", "Email Sent"],
        ["2026-10-01 09:00", "a@x.com", "Ana Lopez", "", "Researcher", "", ""],
        ["2026-10-01 10:30", "b@y.com", "Ben Ode", "Moonworks", "Engineer",
         "Rover path planning", "Twitter"],
        ["2026-10-02 11:15", "c@z.com", "Cy Park", "ESA", "Student",
         "Thesis", "Friend", "ldp_live_0123456789abcdef0123456789abcdef", "Yes"],
    ])
