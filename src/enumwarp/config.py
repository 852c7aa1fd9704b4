"""Runtime settings read from the environment"""
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

# Load .env file if present
load_dotenv()

DEFAULT_SOURCE_PATTERN = r'enums/.*\.java'


@dataclass
class Settings:
    """Webhook, GitHub and load target settings"""
    webhook_secret: str = ''
    github_token: Optional[str] = None
    github_api_url: str = 'https://api.github.com'
    target_branch: str = 'refs/heads/master'    # compared against push event "ref"
    source_pattern: str = DEFAULT_SOURCE_PATTERN  # regex searched in blob paths
    target_schema: str = 'enums'                 # PostgreSQL schema receiving enum tables

    @classmethod
    def from_env(cls) -> 'Settings':
        return cls(
            webhook_secret=os.getenv('GITHUB_WEBHOOK_SECRET', ''),
            github_token=os.getenv('GITHUB_TOKEN') or None,
            github_api_url=os.getenv('GITHUB_API_URL', 'https://api.github.com').rstrip('/'),
            target_branch=os.getenv('TARGET_BRANCH', 'refs/heads/master'),
            source_pattern=os.getenv('ENUM_SOURCE_PATTERN', DEFAULT_SOURCE_PATTERN),
            target_schema=os.getenv('ENUM_SCHEMA', 'enums'),
        )


@dataclass
class DatabaseSettings:
    name: str = 'enumwarp'
    user: str = ''
    password: str = ''
    host: str = ''
    port: str = ''

    @classmethod
    def from_env(cls) -> 'DatabaseSettings':
        return cls(
            name=os.getenv('DB_NAME', 'enumwarp'),
            user=os.getenv('DB_USER', ''),
            password=os.getenv('DB_PASSWORD', ''),
            host=os.getenv('DB_HOST', ''),
            port=os.getenv('DB_PORT', ''),
        )

    def to_dsn(self) -> str:
        """
        libpq connection string with only the non-empty values.

        Leaving host out lets psycopg2 fall back to unix socket auth.
        """
        parts = [f"dbname={self.name}"]
        for key in ('user', 'password', 'host', 'port'):
            value = getattr(self, key)
            if value:
                parts.append(f"{key}={value}")
        return " ".join(parts)
