import re
from dataclasses import dataclass
from datetime import datetime, timezone

from policy_docs.domain.errors import InvalidInputError

_UNSAFE = re.compile(r"[^A-Za-z0-9]")


class FilenameDeriver:
    """Strategy interface."""
    def derive(self, company_name: str, title: str, now: datetime) -> str:
        raise NotImplementedError


def _safe_part(value: object, field: str) -> str:
    if not isinstance(value, str):
        raise InvalidInputError(f"{field} is required and must be text.")
    return _UNSAFE.sub("_", value).lower()


@dataclass(frozen=True)
class TimestampFilenameDeriver(FilenameDeriver):
    """
    company_title_timestamp, every non-alphanumeric character mapped to "_".
    The timestamp is ISO-8601 UTC at second resolution, so two saves in the
    same second with the same identifiers derive the same name.
    """
    separator: str = "_"

    def timestamp(self, now: datetime) -> str:
        if now.tzinfo is not None:
            now = now.astimezone(timezone.utc)
        iso = now.strftime("%Y-%m-%dT%H:%M:%SZ")
        iso = re.sub(r"[:.]", "-", iso)
        return _UNSAFE.sub("_", iso.lower())

    def derive(self, company_name: str, title: str, now: datetime) -> str:
        safe_company = _safe_part(company_name, "companyName")
        safe_title = _safe_part(title, "title")
        return self.separator.join((safe_company, safe_title, self.timestamp(now)))
