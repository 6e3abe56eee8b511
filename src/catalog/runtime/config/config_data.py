"""Pydantic models mirroring the ``config`` section of config.yaml."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, computed_field


class CORSConfig(BaseModel):
    origins: list[str] = Field(default_factory=lambda: ["http://localhost:3000"])
    allow_credentials: bool = True
    allow_methods: list[str] = Field(
        default_factory=lambda: ["GET", "POST", "PUT", "DELETE", "OPTIONS"]
    )
    allow_headers: list[str] = Field(default_factory=lambda: ["*"])


class AppConfig(BaseModel):
    """HTTP server settings."""

    environment: Literal["development", "production", "test"] = "development"
    host: str = "localhost"
    port: int = 8000
    cors: CORSConfig = Field(default_factory=CORSConfig)


class JWTConfig(BaseModel):
    """Bearer token validation.

    Tokens are HMAC-signed with ``secret``; each entry of the
    ``roles_claim`` list becomes the authority ``role_prefix + role``.
    """

    secret: str | None = Field(default=None, description="Shared HMAC signing secret")
    allowed_algorithms: list[str] = Field(
        default_factory=lambda: ["HS256", "HS384", "HS512"]
    )
    gen_issuer: str = Field(
        default="catalog-dev", description="Issuer stamped on locally minted tokens"
    )
    clock_skew: int = Field(default=60, description="Leeway in seconds for exp/nbf/iat")
    roles_claim: str = "roles"
    role_prefix: str = "ROLE_"


class RedisConfig(BaseModel):
    """Connection to the Redis server backing the product cache."""

    enabled: bool = True
    url: str | None = Field(default=None, description="redis:// URL; empty disables the cache")
    password: str | None = None
    decode_responses: bool = True
    max_connections: int = Field(default=50, description="Client pool size")
    socket_timeout: float = 5.0
    socket_connect_timeout: float = 5.0

    @computed_field
    @property
    def connection_string(self) -> str:
        """URL with the password spliced in when it carries no credentials."""
        if not self.url:
            return ""
        if not self.password or "@" in self.url:
            return self.url
        scheme, sep, rest = self.url.partition("://")
        return f"{scheme}://:{self.password}@{rest}" if sep else self.url

    @property
    def sanitized_connection_string(self) -> str:
        if not self.password:
            return self.connection_string
        return self.connection_string.replace(self.password, "***")


class CacheConfig(BaseModel):
    """Product cache key layout: ``<product_namespace><key_separator><id>``."""

    product_namespace: str = "PRODUCT_ID"
    key_separator: str = "~"


class DatabaseConfig(BaseModel):
    url: str = Field(default="sqlite:///./catalog.db", description="SQLAlchemy database URL")
    pool_size: int = 20
    max_overflow: int = 10
    pool_timeout: int = Field(default=30, description="Seconds to wait for a pooled connection")
    pool_recycle: int = Field(default=1800, description="Seconds before a connection is recycled")
    echo: bool = False


class LoggingConfig(BaseModel):
    level: str = "INFO"
    format: Literal["json", "plain"] = Field(
        default="json", description="Format of the file sink; the console is always plain"
    )
    file: str | None = Field(default=None, description="Log file path; empty logs to stderr only")
    max_size_mb: int = 10
    backup_count: int = 5


class ConfigData(BaseModel):
    """Root of the configuration tree."""

    app: AppConfig = Field(default_factory=AppConfig)
    jwt: JWTConfig = Field(default_factory=JWTConfig)
    redis: RedisConfig = Field(default_factory=RedisConfig)
    cache: CacheConfig = Field(default_factory=CacheConfig)
    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
