# trifix/core/security.py
import time, jwt
from passlib.hash import bcrypt_sha256
from trifix.core.config import settings

ALGO = "HS256"

_hasher = bcrypt_sha256.using(rounds=settings.bcrypt_rounds)

def hash_password(raw: str) -> str:
    return _hasher.hash(raw)

def verify_password(raw: str, hashed: str) -> bool:
    return bcrypt_sha256.verify(raw, hashed)

def make_token(user_id: int, ttl: int | None = None) -> str:
    now = int(time.time())
    ttl = settings.token_ttl_seconds if ttl is None else ttl
    payload = {"sub": str(user_id), "id": user_id, "iat": now, "exp": now + ttl}
    return jwt.encode(payload, settings.jwt_secret, algorithm=ALGO)

def decode_token(token: str) -> dict:
    """Raises jwt.ExpiredSignatureError / jwt.InvalidTokenError."""
    return jwt.decode(token, settings.jwt_secret, algorithms=[ALGO])
