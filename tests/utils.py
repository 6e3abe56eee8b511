import time

from authlib.jose import jwt


def hs_token(claims: dict, secret: str, alg: str = "HS256") -> str:
    """Sign ``claims`` as-is, without the defaults the generator adds."""
    token = jwt.encode({"alg": alg, "typ": "JWT"}, claims, secret)
    return token.decode("utf-8") if isinstance(token, bytes) else token


def now() -> int:
    return int(time.time())
