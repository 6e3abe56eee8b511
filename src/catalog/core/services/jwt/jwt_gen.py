import time
from typing import Any

from authlib.common.security import generate_token
from authlib.jose import jwt

from src.catalog.runtime.config.config_data import ConfigData
from src.catalog.runtime.context import get_config


class JwtGeneratorService:
    """Mint bearer tokens signed with the shared secret.

    Used by the ``catalog issue-token`` command and by tests; production
    tokens come from the identity service that shares the secret.
    """

    def generate_jwt(
        self,
        subject: str,
        roles: list[str] | None = None,
        claims: dict[str, Any] | None = None,
        expires_in_seconds: int = 3600,
        algorithm: str = "HS256",
        secret: str | None = None,
    ) -> str:
        """Generate a signed JWT carrying ``sub`` and the roles claim.

        Args:
            subject: Subject (sub) claim
            roles: Roles to grant, e.g. ``["ADMIN"]``
            claims: Additional claims to include in the token
            expires_in_seconds: Token lifetime in seconds (default: 1 hour)
            algorithm: Signing algorithm (default: HS256)
            secret: Signing secret; defaults to the configured one

        Returns:
            Signed JWT token string
        """
        config: ConfigData = get_config()
        secret = secret or config.jwt.secret
        if not secret:
            raise ValueError("JWT signing secret not configured")

        if algorithm not in config.jwt.allowed_algorithms:
            raise ValueError(f"Algorithm {algorithm} not allowed")

        now = int(time.time())
        payload: dict[str, Any] = {
            "iss": config.jwt.gen_issuer,
            "sub": subject,
            "iat": now,
            "exp": now + expires_in_seconds,
            "jti": generate_token(16),
            config.jwt.roles_claim: list(roles or []),
        }
        if claims:
            payload.update(
                {k: v for k, v in claims.items() if k not in {"sub", "iat", "exp"}}
            )

        token = jwt.encode({"alg": algorithm, "typ": "JWT"}, payload, secret)
        return token.decode("utf-8") if isinstance(token, bytes) else token
