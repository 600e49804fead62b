# google_sheets.py
"""
RowStore backed by the form's response sheet, through the Sheets v4 API
with service-account credentials.
"""

import json
import time

from google.oauth2 import service_account
from googleapiclient.discovery import build

from store import RowStore, check_coordinates

SCOPES = ["https://www.googleapis.com/auth/spreadsheets"]


def column_letter(col: int) -> str:
    """1 -> A, 26 -> Z, 27 -> AA."""
    letters = ""
    while col > 0:
        col, rem = divmod(col - 1, 26)
        letters = chr(ord("A") + rem) + letters
    return letters


def sheet_range(sheet_name, cells=""):
    quoted = "'" + sheet_name.replace("'", "''") + "'"
    return f"{quoted}!{cells}" if cells else quoted


def build_service(settings):
    if not settings.service_account_json:
        raise RuntimeError("SERVICE_ACCOUNT_JSON must be set")
    info = json.loads(settings.service_account_json)
    creds = service_account.Credentials.from_service_account_info(info, scopes=SCOPES)
    return build("sheets", "v4", credentials=creds, cache_discovery=False)


class GoogleSheetStore(RowStore):

    def __init__(self, settings, service=None, clock=time.monotonic, sleep=time.sleep):
        if not settings.spreadsheet_id:
            raise RuntimeError("SPREADSHEET_ID must be set")
        self.settings = settings
        self._service = service
        self._clock = clock
        self._sleep = sleep
        self._last_write = None

    @property
    def service(self):
        # built on first use so that importing never needs credentials
        if self._service is None:
            self._service = build_service(self.settings)
        return self._service

    def _get(self, cells=""):
        result = (
            self.service.spreadsheets().values()
                .get(spreadsheetId=self.settings.spreadsheet_id,
                     range=sheet_range(self.settings.sheet_name, cells))
                .execute()
        )
        return result.get("values", [])

    def get_cell(self, row, col):
        check_coordinates(row, col)
        rows = self._get(f"{column_letter(col)}{row}")
        if not rows or not rows[0]:
            return ""
        return rows[0][0]

    def _throttle_write(self):
        # keep writes under the per-user Sheets quota
        if self._last_write is not None:
            wait = self._last_write + self.settings.sheets_write_interval - self._clock()
            if wait > 0:
                self._sleep(wait)
        self._last_write = self._clock()

    def set_cell(self, row, col, value):
        check_coordinates(row, col)
        self._throttle_write()
        self.service.spreadsheets().values().update(
            spreadsheetId=self.settings.spreadsheet_id,
            range=sheet_range(self.settings.sheet_name, f"{column_letter(col)}{row}"),
            valueInputOption="RAW",
            body={"values": [[value]]},
        ).execute()

    def row_count(self):
        return len(self._get())

    def column_count(self):
        return max((len(r) for r in self._get()), default=0)

    def row_values(self, row, width):
        # one request instead of one per cell
        check_coordinates(row, width)
        rows = self._get(f"A{row}:{column_letter(width)}{row}")
        values = rows[0] if rows else []
        return (list(values) + [""] * width)[:width]

    def rows(self, width):
        return [(list(r) + [""] * width)[:width] for r in self._get()]
