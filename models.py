from dataclasses import dataclass

from store import is_blank

DEFAULT_ORGANIZATION = "Independent"
NOT_SPECIFIED        = "Not specified"


def _cell(values, index, default=""):
    value = values[index] if index < len(values) else None
    if is_blank(value):
        return default
    return str(value).strip()


@dataclass
class SubmissionRecord:
    timestamp: str
    email: str
    name: str
    organization: str = DEFAULT_ORGANIZATION
    role: str         = ""
    use_case: str     = NOT_SPECIFIED
    source: str       = NOT_SPECIFIED
    api_key: str      = ""
    email_sent: str   = ""  # "", "Yes" or "Failed"

    @classmethod
    def from_values(cls, values, columns):
        """
        Build a record from the ordered cell values of one response row,
        substituting defaults for empty optional fields.
        """
        values = list(values or [])
        return cls(
            timestamp=_cell(values, columns.timestamp),
            email=_cell(values, columns.email),
            name=_cell(values, columns.name),
            organization=_cell(values, columns.organization, DEFAULT_ORGANIZATION),
            role=_cell(values, columns.role),
            use_case=_cell(values, columns.use_case, NOT_SPECIFIED),
            source=_cell(values, columns.source, NOT_SPECIFIED),
            api_key=_cell(values, columns.api_key),
            email_sent=_cell(values, columns.email_sent),
        )

    @property
    def first_name(self) -> str:
        parts = self.name.split()
        return parts[0] if parts else ""
