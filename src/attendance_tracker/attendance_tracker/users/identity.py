"""Deterministic string transforms turning a credential into an identity.

Every function here is total: malformed input degrades to placeholders
instead of raising.
"""

from __future__ import annotations

import re

from ..core.constants import (
    DEFAULT_DERIVED_NAME,
    DEFAULT_TITLE_NAME,
    EMPLOYEE_ID_BODY_LENGTH,
    EMPLOYEE_ID_PAD_CHAR,
    EMPLOYEE_ID_PREFIX,
)
from ..core.enums import Role

_NON_ALNUM = re.compile(r"[^a-zA-Z0-9]")
_SEPARATORS = re.compile(r"[._]")
_DIGIT_RUNS = re.compile(r"[0-9]+")
# Latin-1 letter block is included so accented names survive.
_NON_LETTER_RUNS = re.compile(r"[^A-Za-zÀ-ÿ]+")


def normalize_key(credential: str) -> str:
    """Lookup key for the directory: trimmed and lowercased."""
    return credential.strip().lower()


def _local_part(credential: str) -> str:
    return credential.split("@", 1)[0]


def to_title_case(value: str) -> str:
    """Upper-case the first letter of every letter run, keep the rest as is.

    "MARIA_GARCIA" stays "MARIA GARCIA"; only word starts are forced.
    """
    if not value:
        return DEFAULT_TITLE_NAME

    words = [word for word in _NON_LETTER_RUNS.split(value) if word]
    return " ".join(word[0].upper() + word[1:] for word in words)


def derive_employee_id(credential: str) -> str:
    sanitized = _NON_ALNUM.sub("", _local_part(credential)).upper()
    body = sanitized[:EMPLOYEE_ID_BODY_LENGTH].ljust(EMPLOYEE_ID_BODY_LENGTH, EMPLOYEE_ID_PAD_CHAR)
    return f"{EMPLOYEE_ID_PREFIX}{body}"


def derive_name(credential: str) -> str:
    cleaned = _SEPARATORS.sub(" ", _local_part(credential))
    cleaned = _DIGIT_RUNS.sub(" ", cleaned).strip()
    return to_title_case(cleaned) or DEFAULT_DERIVED_NAME


def home_route_for_role(role: Role) -> str:
    return "/dashboard" if role == Role.ADMIN else "/employee"
