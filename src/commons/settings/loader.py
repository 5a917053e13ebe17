"""Settings loader with hierarchical configuration support."""

import json
import os
from pathlib import Path
from typing import Any

from dotenv import dotenv_values

from src.commons.settings.models import API_KEY_ENV_VAR, Settings


class SettingsLoader:
    """Loads and merges configuration from multiple sources.

    Configuration precedence (highest to lowest):
    1. The TWELVELABS_API_KEY credential variable, from the process
       environment or else from the .env file
    2. Prefixed environment variables (TWELVELABS_MCP__SECTION__KEY)
    3. Environment-specific config (appsettings.{env}.json)
    4. Base config (appsettings.json)
    """

    ENV_PREFIX = "TWELVELABS_MCP__"

    def __init__(
        self,
        config_dir: Path | None = None,
        environment: str | None = None,
        env_file: Path | None = None,
    ) -> None:
        """Initialize the settings loader.

        Args:
            config_dir: Directory containing configuration files.
                       Defaults to 'config' in current working directory.
            environment: Environment name (dev, staging, prod).
                        Defaults to TWELVELABS_MCP__APP__ENVIRONMENT or 'dev'.
            env_file: Dotenv file consulted for the credential variable.
                      Defaults to '.env' in current working directory.
        """
        self.config_dir = config_dir or Path("config")
        self.env_file = env_file or Path(".env")
        self.environment = environment or os.getenv(
            f"{self.ENV_PREFIX}APP__ENVIRONMENT", "dev"
        )

    def load(self) -> Settings:
        """Load settings with proper precedence.

        Returns:
            Fully resolved Settings instance.
        """
        config = self._load_json("appsettings.json")

        env_config = self._load_json(f"appsettings.{self.environment}.json")
        config = self._deep_merge(config, env_config)

        env_overrides = self._load_env_vars()
        config = self._deep_merge(config, env_overrides)

        # The credential is kept verbatim, numeric-looking keys included
        api_key = os.getenv(API_KEY_ENV_VAR) or self._load_dotenv_key()
        if api_key:
            config = self._deep_merge(config, {"twelvelabs": {"api_key": api_key}})

        return Settings(**config)

    def _load_dotenv_key(self) -> str | None:
        """Read the credential variable from the dotenv file, if present."""
        if not self.env_file.is_file():
            return None
        return dotenv_values(self.env_file).get(API_KEY_ENV_VAR) or None

    def _load_env_vars(self) -> dict[str, Any]:
        """Load environment variables with the TWELVELABS_MCP__ prefix.

        Parses env vars like TWELVELABS_MCP__TELEMETRY__LOG_LEVEL into nested
        dicts: {"telemetry": {"log_level": "value"}}

        Returns:
            Nested dictionary of environment variable overrides.
        """
        result: dict[str, Any] = {}

        for key, value in os.environ.items():
            if not key.startswith(self.ENV_PREFIX):
                continue

            key_path = key[len(self.ENV_PREFIX) :].lower().split("__")

            current = result
            for part in key_path[:-1]:
                if part not in current:
                    current[part] = {}
                current = current[part]

            final_key = key_path[-1]
            if final_key == "api_key":
                current[final_key] = value
            else:
                current[final_key] = self._coerce_value(value)

        return result

    def _coerce_value(self, value: str) -> Any:
        """Coerce string environment variable to appropriate type.

        Args:
            value: String value from environment.

        Returns:
            Coerced value (bool, int, float, or original string).
        """
        if value.lower() in ("true", "false"):
            return value.lower() == "true"

        try:
            return int(value)
        except ValueError:
            pass

        try:
            return float(value)
        except ValueError:
            pass

        # JSON for lists/dicts like INDEX_ADDONS
        if value.startswith(("[", "{")):
            try:
                return json.loads(value)
            except json.JSONDecodeError:
                pass

        return value

    def _load_json(self, filename: str) -> dict[str, Any]:
        """Load JSON config file.

        Args:
            filename: Name of the config file.

        Returns:
            Parsed JSON as dictionary, or empty dict if file doesn't exist.
        """
        path = self.config_dir / filename
        if path.exists():
            with path.open(encoding="utf-8") as f:
                return dict(json.load(f))
        return {}

    def _deep_merge(
        self,
        base: dict[str, Any],
        override: dict[str, Any],
    ) -> dict[str, Any]:
        """Deep merge two dictionaries.

        Args:
            base: Base dictionary.
            override: Dictionary with values to override.

        Returns:
            Merged dictionary.
        """
        result = base.copy()
        for key, value in override.items():
            if (
                key in result
                and isinstance(result[key], dict)
                and isinstance(value, dict)
            ):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value
        return result


_settings: Settings | None = None


def get_settings(
    config_dir: Path | None = None,
    environment: str | None = None,
    *,
    reload: bool = False,
) -> Settings:
    """Get or create the cached settings instance.

    Args:
        config_dir: Optional config directory override.
        environment: Optional environment override.
        reload: Force reload settings from files.

    Returns:
        Settings instance.
    """
    global _settings  # noqa: PLW0603
    if _settings is None or reload:
        loader = SettingsLoader(config_dir=config_dir, environment=environment)
        _settings = loader.load()
    return _settings


def reset_settings() -> None:
    """Reset the cached settings instance. Useful for testing."""
    global _settings  # noqa: PLW0603
    _settings = None
