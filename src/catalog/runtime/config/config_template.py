"""Load ``config.yaml`` with shell-style environment placeholders."""

import os
import re
from pathlib import Path

import yaml
from loguru import logger
from pydantic import ValidationError

from src.catalog.runtime.config.config_data import ConfigData

# ${NAME}, ${NAME:-default} or ${NAME:?message}
_PLACEHOLDER = re.compile(r"\$\{(?P<name>[A-Za-z_][A-Za-z0-9_]*)(?:(?P<op>:-|:\?)(?P<arg>[^}]*))?\}")


def substitute_env_vars(text: str) -> str:
    """Replace every placeholder in ``text`` with its environment value.

    Raises:
        ValueError: If a placeholder without a default names an unset variable.
    """

    def _resolve(match: re.Match) -> str:
        name, op, arg = match.group("name", "op", "arg")
        value = os.getenv(name)
        if value is not None:
            return value
        if op == ":-":
            return arg
        reason = arg if op == ":?" else "not set"
        raise ValueError(f"Required environment variable {name}: {reason}")

    return _PLACEHOLDER.sub(_resolve, text)


def apply_environment_overrides(env_mode: str) -> None:
    """Promote ``<ENV>_``-prefixed variables to their unprefixed names.

    With ``APP_ENVIRONMENT=production``, ``PRODUCTION_REDIS_URL`` becomes
    ``REDIS_URL`` before the YAML placeholders are resolved.
    """
    prefix = f"{env_mode.upper()}_"
    promoted = [var for var in os.environ if var.startswith(prefix)]
    for var_name in promoted:
        os.environ[var_name[len(prefix):]] = os.environ[var_name]
    if promoted:
        logger.info("Applied {} environment overrides: {}", env_mode, promoted)


def load_templated_yaml(file_path: Path) -> ConfigData:
    """Read the ``config`` section of a YAML file into ``ConfigData``.

    Raises:
        ValueError: On a missing required variable, unparsable YAML or a
            configuration that fails validation.
    """
    env_mode = os.getenv("APP_ENVIRONMENT", "development")
    logger.info("Loading {} for environment: {}", file_path, env_mode)
    apply_environment_overrides(env_mode)

    text = substitute_env_vars(Path(file_path).read_text())
    try:
        document = yaml.safe_load(text) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Error parsing YAML: {e}") from e

    try:
        return ConfigData.model_validate(document.get("config") or {})
    except ValidationError as e:
        raise ValueError(f"Invalid configuration: {e}") from e
