"""
Environment Variable Settings

Reads client settings from PROXER_* environment variables (optionally loaded
from a .env file) so scripts can build a client without hardcoding the key.

Recognized variables:
- PROXER_API_KEY
- PROXER_TEST_MODE
- PROXER_HOST
- PROXER_PORT
- PROXER_PATH
- PROXER_USE_SSL
- PROXER_DEVICE
- PROXER_TIMEOUT
"""

import os
import logging
from typing import Any, Dict, Mapping, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError

from ProxerPy.clients.exceptions import InvalidParametersError
from ProxerPy.clients.options import (
    ApiKeyType,
    DEFAULT_HOST,
    DEFAULT_PATH,
    ProxerOptions,
    TEST_MODE,
    default_device,
)

logger = logging.getLogger(__name__)

ENV_PREFIX = "PROXER_"


class ProxerSettings(BaseModel):
    api_key: Optional[str] = Field(None, description="Proxer API key")
    test_mode: bool = Field(False, description="Use the API test mode instead of a key")
    host: str = DEFAULT_HOST
    path: str = DEFAULT_PATH
    port: Optional[int] = None
    use_ssl: bool = True
    device: str = Field(default_factory=default_device)
    timeout: float = Field(30, gt=0, description="Transport timeout in seconds")

    def get_api_key(self) -> ApiKeyType:
        """
        Resolve the key to create a client with

        Raises:
            InvalidParametersError: If neither a key nor test mode is configured
        """
        if self.test_mode:
            return TEST_MODE
        if self.api_key:
            return self.api_key
        raise InvalidParametersError(f"{ENV_PREFIX}API_KEY is not set and test mode is disabled")

    def to_options(self) -> ProxerOptions:
        return ProxerOptions(
            host=self.host,
            path=self.path,
            port=self.port,
            use_ssl=self.use_ssl,
            device=self.device,
        )


def read_env_values(environ: Mapping[str, str]) -> Dict[str, str]:
    """Collect PROXER_* values for the known settings fields, skipping empty ones"""
    values = {}
    for field_name in ProxerSettings.model_fields:
        env_var_name = f"{ENV_PREFIX}{field_name.upper()}"
        value = environ.get(env_var_name)
        if value:
            values[field_name] = value
            logger.debug(f"Found setting {field_name} from env var {env_var_name}")
    return values


def load_settings(env_file: Optional[str] = None,
                  environ: Optional[Mapping[str, str]] = None) -> ProxerSettings:
    """
    Load client settings from the environment

    Args:
        env_file: Path of a .env file to load first (default: search for .env)
        environ: Mapping to read instead of os.environ; no .env file is loaded then

    Returns:
        Validated ProxerSettings

    Raises:
        InvalidParametersError: If a variable holds an invalid value
    """
    if environ is None:
        load_dotenv(dotenv_path=env_file)
        environ = os.environ

    values: Dict[str, Any] = read_env_values(environ)

    try:
        settings = ProxerSettings.model_validate(values)
    except ValidationError as e:
        fields = [".".join(str(part) for part in error["loc"]) for error in e.errors()]
        raise InvalidParametersError(
            f"Invalid {ENV_PREFIX}* settings: {', '.join(fields)}",
            details={"fields": fields}
        ) from e

    logger.info(f"Loaded {len(values)} Proxer settings from environment variables")
    return settings
