# ABOUTME: Credentials package for generating new profile identifiers.
# ABOUTME: Exports unique code, PIN and ID-card generators plus their format checks.

from kontactshare_admin.credentials.generator import (
    generate_id_card,
    generate_pin,
    generate_unique_code,
    is_valid_id_card,
    is_valid_pin,
    is_valid_unique_code,
)

__all__ = [
    "generate_id_card",
    "generate_pin",
    "generate_unique_code",
    "is_valid_id_card",
    "is_valid_pin",
    "is_valid_unique_code",
]
