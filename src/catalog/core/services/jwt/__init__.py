"""Bearer token services."""

from .jwt_gen import JwtGeneratorService
from .token_verifier import BEARER_PREFIX, TokenVerifier

__all__ = ["BEARER_PREFIX", "JwtGeneratorService", "TokenVerifier"]
