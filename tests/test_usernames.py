"""Unit tests for login handle generation."""

import re

from scolaris.auth.usernames import PRINCIPAL_PREFIX, TEACHER_PREFIX, generate_username


def test_username_format() -> None:
    """Prefix + last name + "." + first name + 2 digits."""
    username = generate_username("Hassan", "Amina", TEACHER_PREFIX)
    assert re.match(r"^prof\.hassan\.amina\d{2}$", username)


def test_accents_and_symbols_are_stripped() -> None:
    username = generate_username("Élodie", "Jean-Noël", PRINCIPAL_PREFIX)
    assert username.startswith("prin.elodie.jeannoel")


def test_empty_parts_do_not_fail() -> None:
    username = generate_username("", "")
    assert re.match(r"^\.\d{2}$", username)


def test_random_suffix_varies() -> None:
    """Multiple calls produce different handles (random suffix)."""
    names = {generate_username("Hassan", "Amina") for _ in range(20)}
    # 100 possibilities, 20 calls should almost always give at least 2 distinct
    assert len(names) >= 2
