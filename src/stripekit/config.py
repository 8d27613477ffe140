"""
Client Configuration

Holds the credentials and endpoint settings shared by every route group.
Values come either from explicit construction or from the environment,
optionally seeded from a dotenv file.
"""

import os
from typing import Optional

import dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .engine.exceptions import ConfigurationError
from .schemas.versions import ApiVersion, DEFAULT_API_VERSION

API_BASE = "https://api.stripe.com/"
API_PATH_PREFIX = "v1/"


class StripeConfig(BaseModel):
    """API client configuration."""
    model_config = ConfigDict(frozen=True)

    api_key: str = Field(..., min_length=1, description="Secret API key sent as a bearer token")
    api_version: str = Field(default=DEFAULT_API_VERSION.value, description="Pinned API version header")
    api_base: str = Field(default=API_BASE, description="Base URL of the API host")
    timeout: float = Field(default=60.0, gt=0, description="Request timeout in seconds")

    @field_validator("api_version")
    @classmethod
    def _known_version(cls, value: str) -> str:
        return ApiVersion.from_string(value).value

    @field_validator("api_base")
    @classmethod
    def _trailing_slash(cls, value: str) -> str:
        return value if value.endswith("/") else value + "/"

    def url_for(self, path: str) -> str:
        """Absolute URL of an API path such as ``customers/cus_123``."""
        return f"{self.api_base}{API_PATH_PREFIX}{path.lstrip('/')}"

    @classmethod
    def from_env(cls, env_file: Optional[str] = None) -> "StripeConfig":
        """
        Build configuration from environment variables.

        Reads ``STRIPE_API_KEY`` (required), ``STRIPE_API_VERSION``,
        ``STRIPE_API_BASE`` and ``STRIPE_TIMEOUT``. When ``env_file`` is
        given it must exist and is loaded first without overriding variables
        already set in the process environment.

        Raises:
            ConfigurationError: If the API key is missing or a value is invalid.
        """
        if env_file is not None:
            if not os.path.exists(env_file):
                raise ConfigurationError(f"Config path is not exist: {env_file}")
            dotenv.load_dotenv(dotenv_path=env_file)

        api_key = os.getenv("STRIPE_API_KEY")
        if not api_key:
            raise ConfigurationError("STRIPE_API_KEY is not set")

        values = {"api_key": api_key}
        if os.getenv("STRIPE_API_VERSION"):
            values["api_version"] = os.environ["STRIPE_API_VERSION"]
        if os.getenv("STRIPE_API_BASE"):
            values["api_base"] = os.environ["STRIPE_API_BASE"]
        if os.getenv("STRIPE_TIMEOUT"):
            values["timeout"] = os.environ["STRIPE_TIMEOUT"]

        try:
            return cls(**values)
        except ValueError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e
