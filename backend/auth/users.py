from __future__ import annotations

import os
from typing import Any

import bcrypt

_users: dict[str, dict[str, Any]] = {}

# username -> (password env var, default password, role)
_DEMO_ACCOUNTS: dict[str, tuple[str, str, str]] = {
    "user": ("DEMO_USER_PASSWORD", "user123", "user"),
    "admin": ("DEMO_ADMIN_PASSWORD", "admin123", "admin"),
}


def _hash_password(plain: str) -> str:
    return bcrypt.hashpw(plain.encode(), bcrypt.gensalt()).decode()


def _verify_password(plain: str, hashed: str) -> bool:
    return bcrypt.checkpw(plain.encode(), hashed.encode())


def _seed_users() -> None:
    """Pre-seed demo accounts on import; passwords may be overridden via env."""
    for username, (env_var, default, role) in _DEMO_ACCOUNTS.items():
        password = os.getenv(env_var, default)
        _users[username] = {"password_hash": _hash_password(password), "role": role}


def authenticate(username: str, password: str) -> dict[str, Any] | None:
    """Verify credentials. Returns ``{username, role}`` or ``None``."""
    record = _users.get(username)
    if record and _verify_password(password, record["password_hash"]):
        return {"username": username, "role": record["role"]}
    return None


_seed_users()
