from typing import Iterable, List

from core.models import PasswordEntry


def matches(entry: PasswordEntry, query: str) -> bool:
    q = query.lower()
    return (
        q in entry.title.lower()
        or q in entry.username.lower()
        or (entry.url is not None and q in entry.url.lower())
    )


def filter_entries(entries: Iterable[PasswordEntry], query: str) -> List[PasswordEntry]:
    """Return entries whose title, username or url contains query.

    A blank query returns everything. Input order is preserved.
    """
    if not query or not query.strip():
        return list(entries)
    return [e for e in entries if matches(e, query)]
