# muaythai/services/auth.py
import logging
import threading
import time
import uuid

from flask import current_app
from flask_jwt_extended import create_access_token, create_refresh_token

logger = logging.getLogger(__name__)


class TokenBlocklist:
    """Revoked token ids kept in process memory until they would expire anyway."""

    def __init__(self, max_size=1000):
        self.max_size = max_size
        self._entries = {}
        self._lock = threading.Lock()

    def revoke(self, jti, expires_at=None):
        with self._lock:
            self._entries[jti] = expires_at
            if len(self._entries) > self.max_size:
                self._purge_expired()

    def is_revoked(self, jti):
        with self._lock:
            return jti in self._entries

    def clear(self):
        with self._lock:
            self._entries.clear()

    def __len__(self):
        return len(self._entries)

    def _purge_expired(self):
        now = time.time()
        expired = [jti for jti, exp in self._entries.items() if exp is not None and exp <= now]
        for jti in expired:
            del self._entries[jti]
        logger.debug("Purged %d expired entries from token blocklist", len(expired))


token_blocklist = TokenBlocklist()


def issue_tokens(user):
    identity = str(user.id)
    claims = {"email": user.email, "role": user.role, "sid": uuid.uuid4().hex}
    expires = current_app.config["JWT_ACCESS_TOKEN_EXPIRES"]
    return {
        "access_token": create_access_token(identity=identity, additional_claims=claims),
        "refresh_token": create_refresh_token(identity=identity, additional_claims={"sid": claims["sid"]}),
        "token_type": "Bearer",
        "expires_in": int(expires.total_seconds()),
    }


def refresh_access_token(user, session_id=None):
    claims = {"email": user.email, "role": user.role, "sid": session_id or uuid.uuid4().hex}
    expires = current_app.config["JWT_ACCESS_TOKEN_EXPIRES"]
    return {
        "access_token": create_access_token(identity=str(user.id), additional_claims=claims),
        "token_type": "Bearer",
        "expires_in": int(expires.total_seconds()),
    }


def revoke_token(payload):
    token_blocklist.revoke(payload["jti"], payload.get("exp"))
    logger.info("Revoked %s token for %s", payload.get("type", "access"), payload.get("sub"))


def is_token_revoked(payload):
    return token_blocklist.is_revoked(payload["jti"])


# ================================
# Token helpers
# ================================

def extract_token_from_header(header):
    if not header:
        return None
    parts = header.split(" ")
    if len(parts) != 2 or parts[0] != "Bearer" or not parts[1]:
        return None
    return parts[1]


def is_token_expired(payload, now=None):
    exp = payload.get("exp")
    if exp is None:
        return True
    return exp <= (now if now is not None else time.time())


def get_token_time_remaining(payload, now=None):
    """Whole minutes until expiry, never negative."""
    exp = payload.get("exp")
    if exp is None:
        return 0
    remaining = exp - (now if now is not None else time.time())
    return max(0, int(remaining // 60))
