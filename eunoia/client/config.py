"""Client configuration with environment variable loading.

Pydantic-based configuration for the backend API clients.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

# Load environment variables from .env file
load_dotenv()


class ClientConfig(BaseModel):
    """Configuration for the Eunoia backend clients.

    Attributes:
        api_base_url: Base URL of the chat, journal and auth backend.
        services_base_url: Base URL of the ``/api`` service (planner and emotion log).
        request_timeout: Seconds to wait on a request, including a full chat stream.
    """

    api_base_url: str = Field(
        default_factory=lambda: os.getenv("EUNOIA_API_URL", "http://localhost:5000"),
        description="Base URL of the Eunoia backend",
    )
    services_base_url: str = Field(
        default_factory=lambda: os.getenv("EUNOIA_SERVICES_URL", "http://localhost:5000/api"),
        description="Base URL of the planner and emotion endpoints",
    )
    request_timeout: float = Field(
        default_factory=lambda: float(os.getenv("EUNOIA_REQUEST_TIMEOUT", "120")),
        ge=1.0,
        le=600.0,
        description="Request timeout in seconds",
    )

    @field_validator("api_base_url", "services_base_url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Require an absolute http(s) URL and drop any trailing slash."""
        v = v.strip()
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"Backend URL must start with http:// or https://, got {v!r}")
        return v.rstrip("/")


def get_client_config() -> ClientConfig:
    """Create client configuration from environment.

    Returns:
        Configured ClientConfig instance.

    Raises:
        ValueError: If a configured URL is not an http(s) URL.
    """
    return ClientConfig()
