"""Configuration management for Shortlinks.

Supports JSON configuration format with auto-discovery.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field, replace
from pathlib import Path

from shortlinks.core.types import EntryMap, parse_mapping

CONFIG_FILENAME = "shortlinks.json"

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ServerConfig:
    """Server configuration."""

    host: str = "127.0.0.1"
    port: int = 8080


@dataclass(frozen=True)
class Config:
    """Application configuration.

    Loaded once at startup and shared read-only by every request handler.
    """

    not_found_message: str
    links: EntryMap
    server: ServerConfig = field(default_factory=ServerConfig)
    config_path: Path | None = None

    @classmethod
    def load(cls, config_path: Path | None = None) -> Config:
        """Load configuration from file.

        If config_path is provided, loads from that file.
        Otherwise, searches for shortlinks.json in current directory and parents.

        Args:
            config_path: Optional explicit path to config file

        Returns:
            Config instance

        Raises:
            FileNotFoundError: If no config file exists
            ValueError: If configuration is invalid
        """
        if config_path is not None:
            if not config_path.exists():
                raise FileNotFoundError(f"Configuration file not found: {config_path}")
            return cls._load_from_file(config_path)

        discovered_path = cls._discover_config()
        if discovered_path is None:
            raise FileNotFoundError(
                f"No {CONFIG_FILENAME} found in {Path.cwd()} or its parents"
            )

        return cls._load_from_file(discovered_path)

    @classmethod
    def _discover_config(cls) -> Path | None:
        """Search for config file in current directory and parents.

        Returns:
            Path to config file or None if not found
        """
        current = Path.cwd()
        while True:
            candidate = current / CONFIG_FILENAME
            if candidate.exists():
                return candidate
            parent = current.parent
            if parent == current:
                return None
            current = parent

    @classmethod
    def _load_from_file(cls, path: Path) -> Config:
        """Load configuration from a specific file.

        Args:
            path: Path to JSON configuration file

        Returns:
            Config instance

        Raises:
            ValueError: If configuration is invalid
        """
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {path}: {e}") from e

        config = cls.from_dict(data, config_path=path)
        logger.info(f"Loaded shortlinks from {path}")
        return config

    @classmethod
    def from_dict(cls, data: object, *, config_path: Path | None = None) -> Config:
        """Build configuration from an already-decoded document.

        Args:
            data: Decoded JSON document
            config_path: Path the document was read from, if any

        Returns:
            Config instance

        Raises:
            ValueError: If configuration is invalid
        """
        if not isinstance(data, dict):
            raise ValueError("Configuration must be a dictionary")

        not_found_message = data.get("not_found_message")
        if not isinstance(not_found_message, str):
            raise ValueError("not_found_message must be a string")

        links = cls._parse_links(data.get("links"))
        server = cls._parse_server(data.get("server"))

        return cls(
            not_found_message=not_found_message,
            links=links,
            server=server,
            config_path=config_path,
        )

    @classmethod
    def _parse_links(cls, data: object) -> EntryMap:
        """Parse links section into the entry tree.

        Args:
            data: Raw links section data

        Returns:
            Read-only entry mapping
        """
        if not isinstance(data, dict):
            raise ValueError("links section must be a dictionary")

        return parse_mapping(data)

    @classmethod
    def _parse_server(cls, data: object) -> ServerConfig:
        """Parse server configuration section.

        Args:
            data: Raw server section data

        Returns:
            ServerConfig instance
        """
        if data is None:
            return ServerConfig()

        if not isinstance(data, dict):
            raise ValueError("server section must be a dictionary")

        host = data.get("host", "127.0.0.1")
        if not isinstance(host, str):
            raise ValueError("server.host must be a string")

        port = data.get("port", 8080)
        if not isinstance(port, int) or isinstance(port, bool):
            raise ValueError("server.port must be an integer")

        return ServerConfig(host=host, port=port)

    def with_overrides(
        self,
        *,
        host: str | None = None,
        port: int | None = None,
    ) -> Config:
        """Create a new Config with CLI overrides applied.

        Only non-None values override the existing config. The original
        Config is not modified.

        Args:
            host: Override server.host
            port: Override server.port

        Returns:
            New Config instance with overrides applied
        """
        if host is None and port is None:
            return self

        server = replace(
            self.server,
            host=host if host is not None else self.server.host,
            port=port if port is not None else self.server.port,
        )
        return replace(self, server=server)
