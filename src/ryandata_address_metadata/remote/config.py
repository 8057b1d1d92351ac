from __future__ import annotations

import os
from dataclasses import dataclass, field

DEFAULT_SERVICE_URL = "https://chromium-i18n.appspot.com/ssl-address"


def _env_flag(name: str, default: str = "1") -> bool:
    value = os.getenv(name, default)
    return value.lower() not in {"0", "false", "no"}


@dataclass
class ServiceClientConfig:
    """Configuration for the address metadata service client."""

    base_url: str = field(
        default_factory=lambda: os.getenv("RYANDATA_ADDRESS_SERVICE_URL", DEFAULT_SERVICE_URL)
    )
    timeout: float = field(
        default_factory=lambda: float(os.getenv("RYANDATA_ADDRESS_SERVICE_TIMEOUT", "10"))
    )
    cache: bool = field(default_factory=lambda: _env_flag("RYANDATA_ADDRESS_SERVICE_CACHE", "1"))
    cache_size: int = field(
        default_factory=lambda: int(os.getenv("RYANDATA_ADDRESS_SERVICE_CACHE_SIZE", "512"))
    )
