"""Active configuration held in a context variable.

Code reads configuration with ``get_config()``; tests swap parts of it
with ``with_context(ConfigData(...))``.
"""

import os
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, replace
from pathlib import Path

from loguru import logger

from src.catalog.runtime.config.config_data import ConfigData
from src.catalog.runtime.config.config_template import load_templated_yaml


@dataclass
class AppContext:
    config: ConfigData


def _load_default_config() -> ConfigData:
    config_path = Path(os.getenv("CATALOG_CONFIG_FILE", "config.yaml"))
    if not config_path.exists():
        logger.warning("{} not found, using built-in configuration defaults", config_path)
        return ConfigData()
    return load_templated_yaml(config_path)


_app_context: ContextVar[AppContext] = ContextVar(
    "app_context", default=AppContext(config=_load_default_config())
)


def get_context() -> AppContext:
    return _app_context.get()


def set_context(context: AppContext) -> Token[AppContext]:
    return _app_context.set(context)


def _deep_merge(base: dict, override: dict) -> dict:
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def _merge_configs(base_config: ConfigData, override_config: ConfigData) -> ConfigData:
    """Overlay the explicitly set fields of ``override_config`` on ``base_config``."""
    merged = _deep_merge(
        base_config.model_dump(), override_config.model_dump(exclude_unset=True)
    )
    return ConfigData.model_validate(merged)


@contextmanager
def with_context(config_override: ConfigData | None = None):
    """Temporarily override parts of the active configuration.

    Only fields explicitly set on ``config_override`` replace current values.

    Example:
        with with_context(ConfigData(cache=CacheConfig(product_namespace="P"))):
            assert get_config().cache.product_namespace == "P"
    """
    if config_override is None:
        yield
        return

    if not isinstance(config_override, ConfigData):
        raise ValueError(
            f"config_override must be ConfigData, or None, got {type(config_override)}"
        )

    merged = _merge_configs(get_context().config, config_override)
    token = set_context(replace(get_context(), config=merged))
    try:
        yield
    finally:
        _app_context.reset(token)


def get_config() -> ConfigData:
    return get_context().config
