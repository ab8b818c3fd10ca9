"""Configuration management for the Cat Database MCP Server.

This module covers the settings the server needs at startup:
1. Protocol Metadata - server identity and protocol version for the handshake
2. Transport Configuration - stdio today, validated so typos fail fast
3. Storage - SQLAlchemy URL for the cat repository (in-memory by default)
4. Validation - Type-safe configuration with Pydantic v2
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_INSTRUCTIONS = (
    "A Cat Database MCP Server that provides tools to manage and query cat data. "
    "Use the available tools to list all cats, get specific cat information by ID, "
    "search by breed, or filter for indoor cats only."
)


class ServerConfig(BaseSettings):
    """MCP Server configuration.

    MCP servers MUST provide:
    - Server name and version for protocol handshake
    - A protocol version they speak
    - Transport configuration

    Every field can be overridden with a ``CAT_DATABASE_`` environment variable
    or a ``.env`` file.
    """

    model_config = SettingsConfigDict(
        # Use CAT_DATABASE_ prefix for all env vars
        env_prefix="CAT_DATABASE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # === Server Metadata (Required by MCP Protocol) ===

    server_name: str = Field(
        default="cat-database-server",
        description="MCP server name used in protocol handshake",
        pattern=r"^[a-z0-9-]+$",
    )

    server_version: str = Field(
        default="1.0.0",
        description="Server version for capability negotiation",
        pattern=r"^\d+\.\d+\.\d+(-[a-zA-Z0-9.]+)?$",
    )

    protocol_version: str = Field(
        default="2024-11-05",
        description="MCP protocol revision advertised during the handshake",
        pattern=r"^\d{4}-\d{2}-\d{2}$",
    )

    instructions: str = Field(
        default=DEFAULT_INSTRUCTIONS,
        description="Free-text usage instructions sent to clients on initialize",
        min_length=1,
    )

    # === Storage Configuration ===

    database_url: str = Field(
        default="sqlite://",
        description="SQLAlchemy URL for the cat repository (in-memory SQLite by default)",
    )

    # === Transport Configuration ===

    transport: str = Field(
        default="stdio",
        description="Transport mechanism",
        pattern=r"^stdio$",
    )

    # === Development Configuration ===

    debug: bool = Field(
        default=False,
        description="Enable debug logging for protocol messages",
    )

    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)",
        pattern=r"^(DEBUG|INFO|WARNING|ERROR)$",
    )

    # === Validation Methods ===

    @field_validator("server_name")
    @classmethod
    def validate_server_name(cls, v: str) -> str:
        """Validate server name meets MCP naming conventions.

        MCP clients use server names for identification and routing.
        """
        if len(v) < 3:
            raise ValueError("Server name must be at least 3 characters")
        if len(v) > 50:
            raise ValueError("Server name must not exceed 50 characters")
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: object) -> object:
        if isinstance(v, str):
            return v.strip().upper()
        return v

    # === Computed Properties ===

    @property
    def effective_log_level(self) -> str:
        return "DEBUG" if self.debug else self.log_level

    @property
    def server_info(self) -> dict[str, str]:
        """Server identity (serverInfo) sent in the initialize response."""
        return {
            "name": self.server_name,
            "version": self.server_version,
        }


# === Global Configuration Instance ===


class _ConfigStore:
    """Internal storage for configuration singleton."""

    _instance: ServerConfig | None = None


def get_config() -> ServerConfig:
    """Get or create the global configuration instance."""
    if _ConfigStore._instance is None:  # type: ignore[reportPrivateUsage]
        _ConfigStore._instance = ServerConfig()  # type: ignore[reportPrivateUsage]
    return _ConfigStore._instance  # type: ignore[reportPrivateUsage]


def reset_config() -> None:
    """Reset configuration (useful for testing)."""
    _ConfigStore._instance = None  # type: ignore[reportPrivateUsage]
