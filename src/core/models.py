"""Vault data models.

PasswordEntry: one row of the `passwords` table.
SelfDestructSettings: per-user options for the emergency wipe.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

WRITABLE_FIELDS = ("title", "username", "password", "url", "notes")

SELF_DESTRUCT_STATUSES = ("initiated", "completed", "cancelled", "failed")


@dataclass(frozen=True)
class PasswordEntry:
    id: str
    user_id: str
    title: str
    username: str
    password: str
    url: Optional[str] = None
    notes: Optional[str] = None
    created_at: Optional[str] = None   # ISO-8601 from PostgREST
    updated_at: Optional[str] = None
    category_id: Optional[str] = None

    @classmethod
    def from_row(cls, row: Dict[str, Any]) -> "PasswordEntry":
        return cls(
            id=str(row.get("id", "")),
            user_id=str(row.get("user_id", "")),
            title=row.get("title") or "",
            username=row.get("username") or "",
            password=row.get("password") or "",
            url=row.get("url"),
            notes=row.get("notes"),
            created_at=row.get("created_at"),
            updated_at=row.get("updated_at"),
            category_id=row.get("category_id"),
        )

    def to_payload(self) -> Dict[str, Any]:
        return make_payload(
            self.title, self.username, self.password, self.url, self.notes
        )


def make_payload(
    title: str,
    username: str,
    password: str,
    url: Optional[str] = None,
    notes: Optional[str] = None,
) -> Dict[str, Any]:
    """Build the writable column set; blank optional fields become None."""
    return {
        "title": title,
        "username": username,
        "password": password,
        "url": url or None,
        "notes": notes or None,
    }


def parse_cooldown(value: Any, default: int = 30) -> int:
    """'30s' / '30' / 30 -> 30. Anything unparsable yields the default."""
    if value is None:
        return default
    if isinstance(value, (int, float)):
        return max(0, int(value))
    txt = str(value).strip().lower()
    if txt.endswith("s"):
        txt = txt[:-1]
    try:
        return max(0, int(txt))
    except ValueError:
        return default


@dataclass(frozen=True)
class SelfDestructSettings:
    user_id: str
    cooldown_seconds: int = 30
    require_2fa: bool = True
    notify_email: bool = True

    @classmethod
    def from_row(cls, row: Dict[str, Any]) -> "SelfDestructSettings":
        return cls(
            user_id=str(row.get("user_id", "")),
            cooldown_seconds=parse_cooldown(row.get("cooldown_period")),
            require_2fa=bool(row.get("require_2fa", True)),
            notify_email=bool(row.get("notify_email", True)),
        )
