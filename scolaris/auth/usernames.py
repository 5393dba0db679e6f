"""
Login handle generation for principals and staff.
Format: role prefix + last name + "." + first name + 2 random digits, lowercase ASCII.
"""

import re
import secrets
import unicodedata

PRINCIPAL_PREFIX = "prin."
TEACHER_PREFIX = "prof."
SUPERVISOR_PREFIX = "srv."


def _clean(part: str) -> str:
    """Lowercase, strip accents, keep only a-z and 0-9."""
    if not part:
        return ""
    decomposed = unicodedata.normalize("NFD", str(part).lower())
    without_accents = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return re.sub(r"[^a-z0-9]", "", without_accents)


def generate_username(last_name: str, first_name: str, prefix: str = "") -> str:
    """
    Examples:
        ("Hassan", "Amina", "prof.") -> prof.hassan.amina42
        ("Élodie", "Noël", "srv.")   -> srv.elodie.noel07

    The random suffix only makes collisions unlikely; callers check uniqueness.
    """
    suffix = f"{secrets.randbelow(100):02d}"
    return f"{prefix}{_clean(last_name)}.{_clean(first_name)}{suffix}"
