"""Settings for the add-in, resolved once at startup.

Each setting is looked up in the runtime configuration first, then the
process environment, then a built-in default. The API key's default is a
placeholder that counts as "not configured".
"""

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Optional

logger = logging.getLogger(__name__)

API_KEY_PLACEHOLDER = "your_api_key_here"

DEFAULT_ENDPOINT = "https://epmfl.openai.azure.com"
DEFAULT_DEPLOYMENT = "gpt-4o"
DEFAULT_API_VERSION = "2024-02-15-preview"
DEFAULT_EXPORT_DIR = "exports"


class ConfigError(Exception):
    """Raised when the runtime configuration cannot be read."""

    pass


def load_runtime_config(path: Path) -> dict[str, Any]:
    """Read a runtime configuration file (a JSON object of setting names).

    Raises:
        ConfigError: If the file is missing, unreadable or not a JSON object.
    """
    try:
        data = json.loads(path.read_text())
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(f"Unable to read runtime config {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"Runtime config {path} must contain a JSON object")
    return data


def _lookup(name: str, runtime: Mapping[str, Any], default: Optional[str]) -> Optional[str]:
    value = runtime.get(name)
    if value:
        logger.debug("Using %s from runtime config", name)
        return str(value)
    value = os.getenv(name)
    if value:
        logger.debug("Using %s from environment", name)
        return value
    return default


@dataclass(frozen=True)
class AddinSettings:
    """Resolved add-in settings.

    Attributes:
        api_key: Azure OpenAI key; API_KEY_PLACEHOLDER when not configured.
        endpoint: Azure OpenAI resource endpoint.
        deployment: Chat model deployment name.
        api_version: Azure OpenAI REST API version.
        timeout: Request timeout in seconds (None for the SDK default).
        export_dir: Directory for JSON exports.
    """

    api_key: str = API_KEY_PLACEHOLDER
    endpoint: str = DEFAULT_ENDPOINT
    deployment: str = DEFAULT_DEPLOYMENT
    api_version: str = DEFAULT_API_VERSION
    timeout: Optional[float] = None
    export_dir: Path = Path(DEFAULT_EXPORT_DIR)

    @property
    def api_key_configured(self) -> bool:
        return bool(self.api_key) and self.api_key != API_KEY_PLACEHOLDER

    def __repr__(self) -> str:
        key = "<set>" if self.api_key_configured else "<missing>"
        return (
            f"AddinSettings(api_key={key}, endpoint={self.endpoint!r}, "
            f"deployment={self.deployment!r}, api_version={self.api_version!r}, "
            f"timeout={self.timeout!r}, export_dir={str(self.export_dir)!r})"
        )

    @classmethod
    def load(cls, runtime_config: Optional[Mapping[str, Any]] = None) -> "AddinSettings":
        """Resolve settings from runtime config, then environment, then defaults.

        Args:
            runtime_config: Runtime-injected settings, keyed like the
                environment variables (e.g. AZURE_OPENAI_API_KEY).

        Raises:
            ConfigError: If AZURE_OPENAI_TIMEOUT is not a number.
        """
        runtime = runtime_config or {}

        api_key = _lookup("AZURE_OPENAI_API_KEY", runtime, None)
        if api_key is None:
            logger.info("No Azure OpenAI API key found in runtime config or environment")
            api_key = API_KEY_PLACEHOLDER

        timeout_raw = _lookup("AZURE_OPENAI_TIMEOUT", runtime, None)
        try:
            timeout = float(timeout_raw) if timeout_raw else None
        except ValueError as e:
            raise ConfigError(f"AZURE_OPENAI_TIMEOUT must be a number, got {timeout_raw!r}") from e

        return cls(
            api_key=api_key,
            endpoint=_lookup("AZURE_OPENAI_ENDPOINT", runtime, DEFAULT_ENDPOINT),
            deployment=_lookup("AZURE_OPENAI_DEPLOYMENT", runtime, DEFAULT_DEPLOYMENT),
            api_version=_lookup("AZURE_OPENAI_API_VERSION", runtime, DEFAULT_API_VERSION),
            timeout=timeout,
            export_dir=Path(_lookup("EXPORT_DIR", runtime, DEFAULT_EXPORT_DIR)),
        )
