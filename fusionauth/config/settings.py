"""Settings loader with environment variable and Docker secrets integration."""
from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from fusionauth.core.rest.client import DEFAULT_CONNECT_TIMEOUT, DEFAULT_READ_TIMEOUT

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:9011"


def _load_secret_from_file(secret_name: str, env_var: str | None = None) -> str | None:
    """
    Load secret from /run/secrets (Docker secrets pattern).

    Priority:
    1. /run/secrets/{secret_name} (Docker secrets mount)
    2. Environment variable (fallback)

    Args:
        secret_name: Name of the secret file in /run/secrets
        env_var: Optional environment variable name to check as fallback

    Returns:
        Secret value or None if not found
    """
    secret_file = Path("/run/secrets") / secret_name

    if secret_file.exists() and secret_file.is_file():
        try:
            secret_value = secret_file.read_text().strip()
            if secret_value:
                logger.info(f"Loaded {secret_name} from /run/secrets")
                return secret_value
        except OSError as e:
            logger.warning(f"Failed to read /run/secrets/{secret_name}: {e}")

    if env_var:
        secret_value = os.getenv(env_var)
        if secret_value:
            logger.info(f"Loaded {env_var} from environment")
            return secret_value

    return None


def _get_timeout(var_name: str, default: int) -> int:
    """Read a timeout in milliseconds from the environment."""
    raw = os.environ.get(var_name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        raise RuntimeError(f"Environment variable {var_name} must be an integer number of milliseconds, got {raw!r}.")
    if value <= 0:
        raise RuntimeError(f"Environment variable {var_name} must be positive, got {value}.")
    return value


@dataclass
class ClientConfig:
    """FusionAuth client configuration container."""
    base_url: str = DEFAULT_BASE_URL
    api_key: Optional[str] = None
    tenant_id: Optional[str] = None
    connect_timeout: int = DEFAULT_CONNECT_TIMEOUT
    read_timeout: int = DEFAULT_READ_TIMEOUT

    @property
    def has_api_key(self) -> bool:
        return bool(self.api_key)


def load_settings() -> ClientConfig:
    """Load client settings from environment and /run/secrets.

    Variables:
        FUSIONAUTH_URL: Base URL (default http://localhost:9011)
        FUSIONAUTH_API_KEY: API key (/run/secrets/fusionauth_api_key wins)
        FUSIONAUTH_TENANT_ID: Tenant scoping every call (optional)
        FUSIONAUTH_CONNECT_TIMEOUT / FUSIONAUTH_READ_TIMEOUT: milliseconds

    Raises:
        RuntimeError: If a timeout is not a positive integer
    """
    base_url = os.environ.get("FUSIONAUTH_URL", "").strip() or DEFAULT_BASE_URL
    api_key = _load_secret_from_file("fusionauth_api_key", "FUSIONAUTH_API_KEY")
    tenant_id = os.environ.get("FUSIONAUTH_TENANT_ID", "").strip() or None

    connect_timeout = _get_timeout("FUSIONAUTH_CONNECT_TIMEOUT", DEFAULT_CONNECT_TIMEOUT)
    read_timeout = _get_timeout("FUSIONAUTH_READ_TIMEOUT", DEFAULT_READ_TIMEOUT)

    if not api_key:
        logger.warning("No FusionAuth API key configured; only anonymous endpoints will succeed")

    logger.debug(f"FusionAuth url={base_url}; tenant={tenant_id or '-'}")

    return ClientConfig(
        base_url=base_url,
        api_key=api_key,
        tenant_id=tenant_id,
        connect_timeout=connect_timeout,
        read_timeout=read_timeout,
    )
