"""Product catalog service.

REST endpoints for products and categories backed by a relational store,
fronted by a Redis cache-aside layer and protected by bearer tokens.
"""

__version__ = "0.1.0"
