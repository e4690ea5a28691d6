# ABOUTME: Generators for the credentials assigned to a new profile.
# ABOUTME: Produces the 16-char unique code, 5-digit PIN and dated ID-card string.

import re
import secrets
import string
from datetime import date

UNIQUE_CODE_ALPHABET = string.ascii_lowercase + string.digits
UNIQUE_CODE_LENGTH = 16

PIN_MIN = 10000
PIN_MAX = 99999

# The middle segment is a fixed placeholder, not a per-day sequence.
ID_CARD_SEQUENCE = "0000"

_PIN_PATTERN = re.compile(r"[0-9]{5}")
_UNIQUE_CODE_PATTERN = re.compile(rf"[a-z0-9]{{{UNIQUE_CODE_LENGTH}}}")
_ID_CARD_PATTERN = re.compile(r"[0-9]{8}-[0-9]{4}-[0-9]{4}")


def generate_unique_code() -> str:
    """Generate the opaque code used in public profile links.

    Returns:
        16 characters drawn uniformly from [a-z0-9].
    """
    return "".join(secrets.choice(UNIQUE_CODE_ALPHABET) for _ in range(UNIQUE_CODE_LENGTH))


def generate_id_card(today: date | None = None) -> str:
    """Generate a display ID-card string.

    Args:
        today: Date to stamp into the ID. Defaults to the current local date.

    Returns:
        String formatted as YYYYMMDD-0000-RRRR.
    """
    if today is None:
        today = date.today()
    suffix = secrets.randbelow(10000)
    return f"{today.strftime('%Y%m%d')}-{ID_CARD_SEQUENCE}-{suffix:04d}"


def generate_pin() -> str:
    """Generate a 5-digit numeric PIN.

    Returns:
        Decimal string in the range 10000-99999.
    """
    return str(PIN_MIN + secrets.randbelow(PIN_MAX - PIN_MIN + 1))


def is_valid_pin(pin: str) -> bool:
    """Check that a PIN is exactly five ASCII digits in the range 10000-99999."""
    if not _PIN_PATTERN.fullmatch(pin or ""):
        return False
    return PIN_MIN <= int(pin) <= PIN_MAX


def is_valid_unique_code(code: str) -> bool:
    return bool(_UNIQUE_CODE_PATTERN.fullmatch(code or ""))


def is_valid_id_card(value: str) -> bool:
    return bool(_ID_CARD_PATTERN.fullmatch(value or ""))
