"""Settings loading."""

from __future__ import annotations

from pydantic import ValidationError

from release_changelog.config.models import ActionSettings
from release_changelog.exceptions import ConfigError


def load_settings(**overrides: object) -> ActionSettings:
    """Build ActionSettings from the environment.

    Args:
        **overrides: Field values that take precedence over the environment

    Raises:
        ConfigError: If the environment holds invalid values
    """
    try:
        return ActionSettings(**overrides)
    except ValidationError as e:
        raise ConfigError(f"Invalid settings: {e}") from e
