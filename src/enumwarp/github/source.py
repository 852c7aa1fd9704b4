"""Fetch enum source files for a commit from the GitHub REST API"""
import base64
import logging
import re
from typing import List, Optional

import requests

from ..config import DEFAULT_SOURCE_PATTERN, Settings

logger = logging.getLogger(__name__)


def is_enum_source(tree_entry: dict, pattern: str = DEFAULT_SOURCE_PATTERN) -> bool:
    """
    Check a git tree entry against the enum source path pattern.

    Tree entries carry `path`, `mode`, `type`, `size`, `sha`, `url`.
    """
    return tree_entry.get('type') == 'blob' and re.search(pattern, tree_entry.get('path', '')) is not None


class GitHubClient:
    """Thin wrapper over the git trees and contents endpoints."""

    def __init__(self, api_url: str = 'https://api.github.com', token: Optional[str] = None, timeout: int = 30):
        self.api_url = api_url.rstrip('/')
        self.timeout = timeout
        self.session = requests.Session()
        self.session.headers['Accept'] = 'application/vnd.github+json'
        if token:
            self.session.headers['Authorization'] = f'token {token}'

    @classmethod
    def from_settings(cls, settings: Settings) -> 'GitHubClient':
        return cls(settings.github_api_url, settings.github_token)

    def _get(self, path: str, params: Optional[dict] = None) -> dict:
        response = self.session.get(f'{self.api_url}{path}', params=params, timeout=self.timeout)
        response.raise_for_status()
        return response.json()

    def get_tree(self, owner: str, repo: str, sha: str) -> List[dict]:
        data = self._get(f'/repos/{owner}/{repo}/git/trees/{sha}', params={'recursive': 1})
        if data.get('truncated'):
            logger.warning(f"Tree listing for {owner}/{repo}@{sha} was truncated by GitHub")
        return data.get('tree', [])

    def get_content(self, owner: str, repo: str, path: str, sha: str) -> dict:
        return self._get(f'/repos/{owner}/{repo}/contents/{path}', params={'ref': sha})


def list_tree_paths(
    client: GitHubClient,
    owner: str,
    repo: str,
    sha: str,
    pattern: str = DEFAULT_SOURCE_PATTERN,
) -> List[str]:
    """Paths of all blobs at the commit that match pattern."""
    return [entry['path'] for entry in client.get_tree(owner, repo, sha) if is_enum_source(entry, pattern)]


def fetch_content(client: GitHubClient, owner: str, repo: str, path: str, sha: str) -> str:
    """Fetch one file at the commit and decode it to text."""
    data = client.get_content(owner, repo, path, sha)
    # Undecodable bytes (legacy Latin-1 or Shift_JIS sources) become U+FFFD
    return base64.b64decode(data['content']).decode('utf-8', errors='replace')


def get_sources(
    client: GitHubClient,
    owner: str,
    repo: str,
    sha: str,
    pattern: str = DEFAULT_SOURCE_PATTERN,
) -> List[str]:
    """
    Fetch the text of every matching source file at a commit.

    Files are fetched one after another, in tree order.
    """
    paths = list_tree_paths(client, owner, repo, sha, pattern)
    logger.info(f"Found {len(paths)} enum source files in {owner}/{repo}@{sha}")
    return [fetch_content(client, owner, repo, path, sha) for path in paths]
