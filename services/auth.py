import logging
import sqlite3
from typing import Any

import bcrypt

import database.database as db
from utils.errors import AuthError

GUEST = {'id': None, 'username': 'guest'}


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode('utf-8'), bcrypt.gensalt()).decode('utf-8')


def check_password(password: str, password_hash: str) -> bool:
    return bcrypt.checkpw(password.encode('utf-8'), password_hash.encode('utf-8'))


def register(conn, username: str, password: str) -> int:
    username = username.strip()
    if not username or not password:
        raise AuthError("Username and password are required")
    if username == GUEST['username']:
        raise AuthError("'guest' is reserved")

    try:
        return db.create_user(conn, username, hash_password(password))
    except sqlite3.IntegrityError as e:
        raise AuthError(f"User '{username}' already exists") from e


def authenticate(conn, username: str, password: str) -> dict[str, Any] | None:
    user = db.get_user_by_username(conn, username.strip())
    if user is None or not check_password(password, user['password_hash']):
        return None
    return {'id': user['id'], 'username': user['username']}


def login(io, conn) -> dict[str, Any]:
    """Prompt for credentials; unknown users and bad passwords continue as guest."""
    username = io.read_line("Username: ")
    password = io.read_secret("Password: ") if hasattr(io, 'read_secret') else io.read_line("Password: ")

    user = authenticate(conn, username, password)
    if user:
        logging.info(f"User {user['username']} authenticated")
        io.write_line(f"\U0001f44b Logged in as {user['username']}")
        return user

    logging.info(f"Authentication failed for '{username.strip()}', continuing as guest")
    io.write_line("\u26a0\ufe0f Not authenticated, continuing as guest")
    return dict(GUEST)
