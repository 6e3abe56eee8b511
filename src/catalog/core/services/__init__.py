from .cache.product_cache import ProductCache
from .catalog import CategoryService, ProductService
from .database.db_session import DbSessionService
from .jwt import JwtGeneratorService, TokenVerifier
from .redis_service import RedisService

__all__ = [
    "CategoryService",
    "DbSessionService",
    "JwtGeneratorService",
    "ProductCache",
    "ProductService",
    "RedisService",
    "TokenVerifier",
]
