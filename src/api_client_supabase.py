# api_client_supabase.py
import logging
import os
import time
from typing import Any, Dict, List, Optional, Tuple

from dotenv import load_dotenv

from core.models import SELF_DESTRUCT_STATUSES, PasswordEntry, SelfDestructSettings
from core.validation import validate_entry_payload

load_dotenv()

logger = logging.getLogger(__name__)

SB_URL = os.getenv("SUPABASE_URL")
SB_ANON = os.getenv("SUPABASE_ANON_KEY")

PASSWORDS = "passwords"
SD_SETTINGS = "self_destruct_settings"
SD_LOGS = "self_destruct_logs"

_sb = None
if SB_URL and SB_ANON:
    from supabase import Client, create_client

    _sb: Client = create_client(SB_URL, SB_ANON)


class VaultError(RuntimeError):
    """A vault operation was rejected by validation or by the backend."""


# ---------------------------------------------------------------------
# INTERNAL HELPERS
# ---------------------------------------------------------------------
def _require_client():
    if _sb is None:
        raise RuntimeError(
            "Supabase client not configured. "
            "Set SUPABASE_URL and SUPABASE_ANON_KEY in a .env file."
        )


def _auth_with_token(token: Optional[str]):
    """Temporarily apply bearer token for PostgREST operations."""
    if _sb is None:
        return
    if token:  # only apply if token is non-empty
        _sb.postgrest.auth(token)


def _rows(res) -> List[Dict[str, Any]]:
    data = getattr(res, "data", None)
    if isinstance(data, list):
        return data
    if isinstance(data, dict):
        return [data]
    return []


def _first_row(res, what: str) -> Dict[str, Any]:
    rows = _rows(res)
    if not rows:
        raise VaultError(f"{what}: no row returned")
    return rows[0]


def _check_payload(payload: Dict[str, Any], partial: bool = False):
    # updates may carry a subset of columns; validate them merged onto
    # placeholders so only the supplied fields can fail
    candidate = dict(payload)
    if partial:
        base = {"title": "-", "username": "-", "password": "-"}
        base.update(candidate)
        candidate = base
    ok, errors = validate_entry_payload(candidate)
    if not ok:
        raise VaultError("Invalid entry: " + "; ".join(errors))


# ---------------------------------------------------------------------
# AUTH
# ---------------------------------------------------------------------
def register_user(email: str, password: str) -> Tuple[bool, Any]:
    """Sign up a new user; falls back to a sign-in when no session is issued."""
    _require_client()
    try:
        res = _sb.auth.sign_up({"email": email, "password": password})
    except Exception as e:
        return False, f"Registration failed: {e}"

    user = getattr(res, "user", None)
    session = getattr(res, "session", None)

    # If sign-up requires email verification, session may be None.
    if not session:
        try:
            login_res = _sb.auth.sign_in_with_password(
                {"email": email, "password": password}
            )
            session = getattr(login_res, "session", None)
            user = getattr(login_res, "user", None)
        except Exception:
            return (
                False,
                "Sign up OK. Please verify your email before logging in.",
            )

    if not user or not session:
        return False, "Sign up failed (no session). Check Supabase Auth settings."

    return True, {"id": str(user.id), "email": getattr(user, "email", email)}


def login(email: str, password: str) -> Tuple[bool, Any, Optional[Dict[str, Any]]]:
    """Email/password login. Returns (ok, token or message, user dict)."""
    try:
        _require_client()
        res = _sb.auth.sign_in_with_password({"email": email, "password": password})

        session = getattr(res, "session", None)
        user = getattr(res, "user", None)
        token = getattr(session, "access_token", None)

        if not session or not token or not user:
            return False, "Invalid credentials or missing session/token.", None

        user_dict = {"id": str(user.id), "email": getattr(user, "email", email)}
        return True, token, user_dict

    except Exception as e:
        return False, f"Login error: {e}", None


def logout():
    """Sign out of the Supabase session."""
    if _sb is None:
        return
    try:
        _sb.auth.sign_out()
    except Exception as e:
        logger.warning("sign_out failed: %s", e)


def current_user() -> Optional[Dict[str, Any]]:
    """Return the signed-in user (id, email) or None."""
    if _sb is None:
        return None
    try:
        res = _sb.auth.get_user()
    except Exception:
        return None
    user = getattr(res, "user", None)
    if not user:
        return None
    return {"id": str(user.id), "email": getattr(user, "email", None)}


# ---------------------------------------------------------------------
# VAULT CRUD
# ---------------------------------------------------------------------
def create_password(token: str, user_id: str, payload: Dict[str, Any]) -> PasswordEntry:
    _check_payload(payload)
    _require_client()
    try:
        _auth_with_token(token)
        res = _sb.table(PASSWORDS).insert([{**payload, "user_id": user_id}]).execute()
    except Exception as e:
        raise VaultError(f"Could not save entry: {e}") from e
    return PasswordEntry.from_row(_first_row(res, "insert"))


def update_password(token: str, entry_id: str, payload: Dict[str, Any]) -> PasswordEntry:
    _check_payload(payload, partial=True)
    _require_client()
    try:
        _auth_with_token(token)
        res = _sb.table(PASSWORDS).update(payload).eq("id", entry_id).execute()
    except Exception as e:
        raise VaultError(f"Could not update entry: {e}") from e
    return PasswordEntry.from_row(_first_row(res, "update"))


def delete_password(token: str, entry_id: str) -> None:
    _require_client()
    try:
        _auth_with_token(token)
        _sb.table(PASSWORDS).delete().eq("id", entry_id).execute()
    except Exception as e:
        raise VaultError(f"Could not delete entry: {e}") from e


def get_passwords(token: str) -> List[PasswordEntry]:
    """All entries visible to the token's user, newest first."""
    _require_client()
    try:
        _auth_with_token(token)
        res = (
            _sb.table(PASSWORDS)
            .select("*")
            .order("created_at", desc=True)
            .execute()
        )
    except Exception as e:
        raise VaultError(f"Could not load entries: {e}") from e
    return [PasswordEntry.from_row(r) for r in _rows(res)]


def get_password_by_id(token: str, entry_id: str) -> PasswordEntry:
    _require_client()
    try:
        _auth_with_token(token)
        res = _sb.table(PASSWORDS).select("*").eq("id", entry_id).execute()
    except Exception as e:
        raise VaultError(f"Could not load entry: {e}") from e
    return PasswordEntry.from_row(_first_row(res, f"entry {entry_id}"))


# ---------------------------------------------------------------------
# SELF-DESTRUCT
# ---------------------------------------------------------------------
def get_self_destruct_settings(token: str, user_id: str) -> SelfDestructSettings:
    """Ensure the settings row exists, then read it back."""
    _require_client()
    try:
        _auth_with_token(token)
        _sb.table(SD_SETTINGS).upsert({"user_id": user_id}).execute()
        res = _sb.table(SD_SETTINGS).select("*").eq("user_id", user_id).execute()
    except Exception as e:
        raise VaultError(f"Failed to load settings: {e}") from e
    rows = _rows(res)
    if not rows:
        return SelfDestructSettings(user_id=user_id)
    return SelfDestructSettings.from_row(rows[0])


def log_self_destruct(token: str, user_id: str, status: str, **extra: Any) -> None:
    if status not in SELF_DESTRUCT_STATUSES:
        raise ValueError(f"Invalid self-destruct status: {status}")
    _require_client()
    _auth_with_token(token)
    _sb.table(SD_LOGS).insert({"user_id": user_id, "status": status, **extra}).execute()


def execute_self_destruct(token: str, user_id: str) -> None:
    """Wipe every entry owned by user_id, logging each stage."""
    _require_client()
    logger.info("self-destruct initiated for %s", user_id)
    try:
        log_self_destruct(
            token, user_id, "initiated", ip_address="desktop-client", user_agent="cloudlock"
        )
        _sb.table(PASSWORDS).delete().eq("user_id", user_id).execute()
        log_self_destruct(
            token, user_id, "completed", completed_at=time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime())
        )
    except Exception as e:
        logger.warning("self-destruct failed for %s: %s", user_id, e)
        try:
            log_self_destruct(token, user_id, "failed", error_message=str(e))
        except Exception as log_err:
            logger.warning("could not record self-destruct failure: %s", log_err)
        raise VaultError(f"Failed to execute self-destruct: {e}") from e
    logger.info("self-destruct completed for %s", user_id)


def cancel_self_destruct(token: str, user_id: str) -> None:
    logger.info("self-destruct cancelled for %s", user_id)
    log_self_destruct(token, user_id, "cancelled")


# ---------------------------------------------------------------------
# HEALTH
# ---------------------------------------------------------------------
def check_connection(retries: int = 3, delay: float = 1.0) -> bool:
    """Probe the passwords table, retrying up to `retries` times."""
    if _sb is None:
        return False
    for attempt in range(1, retries + 1):
        try:
            _sb.table(PASSWORDS).select("count").limit(1).execute()
            return True
        except Exception as e:
            logger.warning("Supabase connection attempt %d failed: %s", attempt, e)
        if attempt < retries:
            time.sleep(delay)
    return False


def ping() -> bool:
    if _sb is None:
        return False
    try:
        res = _sb.rpc("ping").execute()
    except Exception:
        return False
    return getattr(res, "data", None) == "pong"
