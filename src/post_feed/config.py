"""
Configuration constants for the Post Feed client.

This module centralizes all configurable parameters to make the client
easy to point at a different endpoint or tune for a different environment.
"""

from pathlib import Path
from dataclasses import dataclass, field
from typing import Optional


@dataclass
class APIConfig:
    """API configuration settings."""
    base_url: str = "https://jsonplaceholder.typicode.com"
    posts_endpoint: str = "/posts"

    # None keeps the HTTP library's default timeout
    timeout_seconds: Optional[float] = None

    @property
    def posts_url(self) -> str:
        """Get the full URL of the posts endpoint."""
        return f"{self.base_url}{self.posts_endpoint}"


@dataclass
class SearchConfig:
    """Search box configuration."""
    token_separator: str = " "


@dataclass
class LogConfig:
    """Logging configuration."""
    log_directory: Path = field(default_factory=lambda: Path("logs"))
    log_filename: str = "post_feed.log"
    log_level: str = "INFO"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    @property
    def log_file_path(self) -> Path:
        """Get full path to the log file."""
        return self.log_directory / self.log_filename


@dataclass
class Config:
    """Master configuration combining all sub-configurations."""
    api: APIConfig = field(default_factory=APIConfig)
    search: SearchConfig = field(default_factory=SearchConfig)
    log: LogConfig = field(default_factory=LogConfig)


# Global configuration instance
config = Config()
