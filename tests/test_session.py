"""
Tests for the session binding.
"""
from types import SimpleNamespace

from socialdash.session import AuthSession, SessionBinding, TokenSession


class TestSessionBinding:
    """Test SessionBinding.resolve_owner()."""

    def test_anonymous_is_none(self):
        assert SessionBinding(AuthSession()).resolve_owner() is None

    def test_logged_in_owner(self):
        auth = AuthSession()
        binding = SessionBinding(auth)
        auth.login("user-7")
        assert binding.resolve_owner() == "user-7"
        auth.logout()
        assert binding.resolve_owner() is None

    def test_owner_ids_are_strings(self):
        auth = AuthSession()
        auth.login(7)
        assert SessionBinding(auth).resolve_owner() == "7"

    def test_resolving_twice_is_stable(self):
        binding = SessionBinding(AuthSession("abc"))
        assert binding.resolve_owner() == binding.resolve_owner() == "abc"


class TestSessionEvents:
    """Test login/logout notifications."""

    def test_listener_sees_changes(self):
        auth = AuthSession()
        seen = []
        SessionBinding(auth).on_session_change(seen.append)
        auth.login("u1")
        auth.logout()
        assert seen == ["u1", None]

    def test_unsubscribe(self):
        auth = AuthSession()
        seen = []
        unsubscribe = SessionBinding(auth).on_session_change(seen.append)
        unsubscribe()
        unsubscribe()
        auth.login("u1")
        assert seen == []

    def test_collaborator_without_events(self):
        binding = SessionBinding(TokenSession(SimpleNamespace(id=3)))
        unsubscribe = binding.on_session_change(lambda owner: None)
        unsubscribe()
        assert binding.resolve_owner() == "3"


class TestTokenSession:
    def test_without_user(self):
        assert TokenSession().current_owner_id() is None

    def test_with_user(self):
        assert TokenSession(SimpleNamespace(id=12)).current_owner_id() == "12"
