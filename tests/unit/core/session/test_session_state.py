"""Tests for SessionState."""

from __future__ import annotations

from symvora.core.session.models import User


class TestSessionState:
    def test_starts_signed_out(self, session):
        assert session.current_user is None
        assert not session.is_authenticated()

    def test_set_user_authenticates(self, session):
        session.set_user(User(email="ada@example.com", name="Ada"))
        assert session.is_authenticated()
        assert session.current_user.email == "ada@example.com"

    def test_set_none_signs_out(self, signed_in_session):
        signed_in_session.set_user(None)
        assert not signed_in_session.is_authenticated()

    def test_update_name_keeps_email(self, signed_in_session):
        signed_in_session.update_name("Ada Lovelace")
        assert signed_in_session.current_user == User(email="ada@example.com", name="Ada Lovelace")

    def test_update_name_without_user_is_noop(self, session):
        session.update_name("Nobody")
        assert session.current_user is None
        assert not session.is_authenticated()

    def test_update_name_replaces_record(self, signed_in_session):
        before = signed_in_session.current_user
        signed_in_session.update_name("Countess")
        assert before.name == "Ada"


class TestSubscriptions:
    def test_listener_receives_changes(self, session):
        seen = []
        session.subscribe(seen.append)
        user = User(email="a@b.co", name="A")
        session.set_user(user)
        session.set_user(None)
        assert seen == [user, None]

    def test_update_name_notifies(self, signed_in_session):
        seen = []
        signed_in_session.subscribe(seen.append)
        signed_in_session.update_name("New")
        assert seen[-1].name == "New"

    def test_noop_update_does_not_notify(self, session):
        seen = []
        session.subscribe(seen.append)
        session.update_name("x")
        assert seen == []

    def test_unsubscribe(self, session):
        seen = []
        unsubscribe = session.subscribe(seen.append)
        unsubscribe()
        session.set_user(User(email="a@b.co", name="A"))
        assert seen == []
