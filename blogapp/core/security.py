"""Password hashing and encrypted session cookie (JWE, direct AES-256-GCM)."""
import hashlib
import logging
import time

from jose import jwe
from jose.constants import ALGORITHMS
from jose.exceptions import JOSEError
from passlib.context import CryptContext

from blogapp.core.config import get_settings

logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def verify_password(plain: str, hashed: str) -> bool:
    if not hashed:
        return False
    return pwd_context.verify(plain or "", hashed)


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


class SessionCodec:
    """Encrypts and decrypts opaque cookie values.

    The AES key is the SHA-256 digest of ``secret``, so any secret string
    yields a valid 256-bit key.
    """

    def __init__(self, secret: str | bytes):
        if isinstance(secret, str):
            secret = secret.encode("utf-8")
        self._key = hashlib.sha256(secret).digest()

    def encrypt(self, payload: bytes) -> str:
        token = jwe.encrypt(
            payload,
            self._key,
            algorithm=ALGORITHMS.DIR,
            encryption=ALGORITHMS.A256GCM,
        )
        return token.decode("ascii")

    def decrypt(self, token: str) -> bytes | None:
        """Return the plaintext, or None when the token is not ours."""
        if not token:
            return None
        try:
            return jwe.decrypt(token, self._key)
        except (JOSEError, ValueError) as exc:
            logger.debug("Rejected session token: %s", exc)
            return None


def get_session_codec() -> SessionCodec:
    """FastAPI dependency; tests override it with a fixed-secret codec."""
    return SessionCodec(get_settings().secret_key)


# Session token: encrypt(user_id:timestamp)
def create_session_token(codec: SessionCodec, user_id: int) -> str:
    """Create an encrypted session token for the user (for the session cookie)."""
    ts = int(time.time())
    payload = f"{user_id}:{ts}".encode("utf-8")
    return codec.encrypt(payload)


def verify_session_token(codec: SessionCodec, token: str, max_age: int | None = None) -> int | None:
    """Decrypt token and return user_id if valid; None otherwise."""
    payload = codec.decrypt(token)
    if payload is None:
        return None
    try:
        parts = payload.decode("utf-8").split(":", 1)
        user_id = int(parts[0])
        ts = int(parts[1])
    except (ValueError, IndexError):
        return None
    if max_age is not None and abs(time.time() - ts) > max_age:
        return None
    return user_id
