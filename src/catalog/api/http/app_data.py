from dataclasses import dataclass

from src.catalog.core.services import DbSessionService, RedisService, TokenVerifier


@dataclass
class ApplicationDependencies:
    database_service: DbSessionService
    redis_service: RedisService
    token_verifier: TokenVerifier
