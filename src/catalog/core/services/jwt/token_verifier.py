"""Bearer token verification service."""

from typing import Final

from authlib.jose import JoseError, JsonWebToken
from loguru import logger

from src.catalog.core.errors import UnauthorizedError
from src.catalog.core.models.principal import Principal
from src.catalog.runtime.config.config_data import ConfigData
from src.catalog.runtime.context import get_config

BEARER_PREFIX: Final = "Bearer "


class TokenVerifier:
    """Verify HMAC-signed bearer tokens and turn them into a ``Principal``.

    The signature is checked against a shared secret. ``exp``, ``nbf`` and
    ``iat`` are validated with the configured clock skew and ``sub`` must be
    present. The roles claim must be a list of strings; each role becomes an
    authority with the configured prefix (``ADMIN`` -> ``ROLE_ADMIN``).
    """

    def __init__(
        self,
        secret: str,
        *,
        algorithms: list[str] | None = None,
        clock_skew: int = 60,
        roles_claim: str = "roles",
        role_prefix: str = "ROLE_",
    ):
        if not secret:
            raise ValueError("JWT signing secret not configured")
        self._secret = secret
        self._jwt = JsonWebToken(algorithms or ["HS256"])
        self._clock_skew = clock_skew
        self._roles_claim = roles_claim
        self._role_prefix = role_prefix

    @classmethod
    def from_config(cls, config: ConfigData | None = None) -> "TokenVerifier":
        cfg = (config or get_config()).jwt
        return cls(
            cfg.secret or "",
            algorithms=cfg.allowed_algorithms,
            clock_skew=cfg.clock_skew,
            roles_claim=cfg.roles_claim,
            role_prefix=cfg.role_prefix,
        )

    def authenticate(self, authorization: str | None) -> Principal | None:
        """Resolve an ``Authorization`` header value.

        Returns:
            None when the header is absent or does not use the Bearer scheme,
            meaning the request proceeds anonymously.

        Raises:
            UnauthorizedError: If a bearer token is present but invalid.
        """
        if not authorization or not authorization.startswith(BEARER_PREFIX):
            return None
        return self.verify(authorization[len(BEARER_PREFIX):].strip())

    def verify(self, token: str) -> Principal:
        try:
            claims = self._jwt.decode(
                token,
                self._secret,
                claims_options={"sub": {"essential": True}},
            )
            claims.validate(leeway=self._clock_skew)
        except (JoseError, ValueError) as exc:
            logger.info("Rejected bearer token: {}", exc)
            raise UnauthorizedError(f"JWT error: {exc}") from exc

        roles = claims.get(self._roles_claim) or []
        if not isinstance(roles, list) or not all(isinstance(r, str) for r in roles):
            raise UnauthorizedError(f"Claim '{self._roles_claim}' must be a list of strings")

        return Principal(
            subject=str(claims["sub"]),
            roles=roles,
            authorities=frozenset(f"{self._role_prefix}{role}" for role in roles),
            claims=dict(claims),
        )

    def authority_for(self, role: str) -> str:
        """Authority string granted by ``role``."""
        return f"{self._role_prefix}{role}"
