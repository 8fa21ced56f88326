"""
Configuration - read once, never reloaded.
Where the backend lives and who we are to it.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional


@dataclass(frozen=True)
class Config:
    """
    Process-wide configuration.

    Does NOT:
    - Validate the backend location
    - Reload on change

    Missing protocol/host/port are kept as empty strings; the resulting
    URL is malformed and the HTTP client rejects it at send time.
    """
    protocol: str
    host: str
    port: str
    client_id: str
    log_level: str = "INFO"
    metrics_namespace: Optional[str] = None

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, str]) -> 'Config':
        """Build from an environment-shaped mapping"""
        return cls(
            protocol=config_dict.get('ST_PROTOCOL', ''),
            host=config_dict.get('ST_HOST', ''),
            port=config_dict.get('ST_PORT', ''),
            client_id=config_dict.get('ST_CLIENT_ID', ''),
            log_level=config_dict.get('LOG_LEVEL', 'INFO').upper(),
            metrics_namespace=config_dict.get('ST_METRICS_NAMESPACE') or None
        )

    @classmethod
    def from_env(cls) -> 'Config':
        return cls.from_dict(os.environ)

    @property
    def base_url(self) -> str:
        return f"{self.protocol}://{self.host}:{self.port}/smart_tree"
