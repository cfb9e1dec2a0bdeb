"""Tests for the navigation gate."""

from __future__ import annotations

import pytest

from symvora.core.navigation.gate import (
    ENTRY_SCREENS,
    INITIAL_SCREEN,
    PROTECTED_SCREENS,
    Screen,
    parse_screen,
    resolve_screen,
)


class TestResolveScreen:
    @pytest.mark.parametrize("screen", sorted(PROTECTED_SCREENS, key=lambda s: s.value))
    def test_signed_out_protected_goes_to_sign_up(self, screen):
        assert resolve_screen(False, screen) is Screen.SIGN_UP

    @pytest.mark.parametrize("screen", sorted(ENTRY_SCREENS, key=lambda s: s.value))
    def test_signed_in_entry_goes_to_symptoms(self, screen):
        assert resolve_screen(True, screen) is Screen.SYMPTOMS

    @pytest.mark.parametrize("screen", sorted(ENTRY_SCREENS, key=lambda s: s.value))
    def test_signed_out_entry_unchanged(self, screen):
        assert resolve_screen(False, screen) is screen

    @pytest.mark.parametrize("screen", sorted(PROTECTED_SCREENS, key=lambda s: s.value))
    def test_signed_in_protected_unchanged(self, screen):
        assert resolve_screen(True, screen) is screen

    def test_examples(self):
        assert resolve_screen(False, Screen.HISTORY) is Screen.SIGN_UP
        assert resolve_screen(True, Screen.WELCOME) is Screen.SYMPTOMS
        assert resolve_screen(True, Screen.SETTINGS) is Screen.SETTINGS

    def test_initial_screen(self):
        assert INITIAL_SCREEN is Screen.WELCOME

    def test_groups_cover_every_screen(self):
        assert PROTECTED_SCREENS | ENTRY_SCREENS == set(Screen)
        assert not PROTECTED_SCREENS & ENTRY_SCREENS


class TestParseScreen:
    @pytest.mark.parametrize(
        "value, expected",
        [
            ("history", Screen.HISTORY),
            ("History", Screen.HISTORY),
            ("sign_up", Screen.SIGN_UP),
            ("SignUp", Screen.SIGN_UP),
            ("sign-up", Screen.SIGN_UP),
            (" LOGIN ", Screen.LOGIN),
        ],
    )
    def test_parses(self, value, expected):
        assert parse_screen(value) is expected

    def test_unknown(self):
        with pytest.raises(ValueError, match="Unknown screen"):
            parse_screen("dashboard")
