"""
Tests for services/auth.py — bcrypt-backed register/login against the temp DB.
"""
import bcrypt
import pytest

import services.auth as auth
from utils.errors import AuthError


@pytest.fixture(autouse=True)
def fast_hashing(monkeypatch):
    """Low bcrypt cost so the suite stays quick."""
    real_gensalt = bcrypt.gensalt
    monkeypatch.setattr(auth.bcrypt, 'gensalt', lambda: real_gensalt(rounds=4))


class TestRegister:
    def test_register_and_authenticate(self, conn):
        user_id = auth.register(conn, 'alice', 's3cret')
        user = auth.authenticate(conn, 'alice', 's3cret')
        assert user == {'id': user_id, 'username': 'alice'}

    def test_password_is_not_stored_in_clear(self, conn):
        auth.register(conn, 'alice', 's3cret')
        stored = conn.execute("SELECT password_hash FROM users").fetchone()[0]
        assert stored != 's3cret'
        assert auth.check_password('s3cret', stored)

    def test_duplicate_username(self, conn):
        auth.register(conn, 'alice', 'a')
        with pytest.raises(AuthError):
            auth.register(conn, 'alice', 'b')

    def test_guest_is_reserved(self, conn):
        with pytest.raises(AuthError):
            auth.register(conn, 'guest', 'pw')

    def test_empty_credentials_rejected(self, conn):
        with pytest.raises(AuthError):
            auth.register(conn, '  ', 'pw')
        with pytest.raises(AuthError):
            auth.register(conn, 'bob', '')


class TestAuthenticate:
    def test_wrong_password(self, conn):
        auth.register(conn, 'alice', 'right')
        assert auth.authenticate(conn, 'alice', 'wrong') is None

    def test_unknown_user(self, conn):
        assert auth.authenticate(conn, 'nobody', 'pw') is None


class TestLogin:
    def test_login_success(self, conn, scripted):
        auth.register(conn, 'alice', 'pw')
        io = scripted(['alice', 'pw'])
        assert auth.login(io, conn)['username'] == 'alice'

    def test_bad_password_falls_back_to_guest(self, conn, scripted):
        auth.register(conn, 'alice', 'pw')
        io = scripted(['alice', 'nope'])
        user = auth.login(io, conn)
        assert user == {'id': None, 'username': 'guest'}
        assert any('guest' in line for line in io.output)

    def test_guest_fallback_message(self, conn, scripted):
        io = scripted(['nobody', 'pw'])
        auth.login(io, conn)
        assert io.output == ['\u26a0\ufe0f Not authenticated, continuing as guest']
