"""Configuration loader for the web fetch server."""

import json
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, Field


class ServerInfo(BaseModel):
    """Identity reported to MCP clients during initialization."""

    name: str = Field(default="web-fetch")
    version: str = Field(default="1.0.0")


class HttpConfig(BaseModel):
    """Settings handed to the HTTP executor at construction."""

    default_headers: dict[str, str] = Field(default_factory=dict)
    default_timeout_ms: Optional[float] = Field(default=30000, gt=0)
    max_redirects: int = Field(default=20, ge=0)
    verify_tls: bool = Field(default=True)
    trust_env: bool = Field(default=False)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO")


class Config(BaseModel):
    """Full server configuration."""

    server: ServerInfo = Field(default_factory=ServerInfo)
    http: HttpConfig = Field(default_factory=HttpConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Config":
        """Build config from a parsed mapping; missing sections take defaults."""
        return cls(**data)


def load_config(path: str | Path) -> Config:
    """Load configuration from file (YAML or JSON)."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, encoding="utf-8") as f:
        content = f.read()

    if path.suffix in (".yaml", ".yml"):
        data = yaml.safe_load(content) or {}
    else:
        data = json.loads(content)

    return Config.from_dict(data)
