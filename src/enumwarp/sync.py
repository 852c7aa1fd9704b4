"""
Enum sync pipeline: source text -> parsed enums -> tables -> PostgreSQL.

    sources = get_sources(client, owner, repo, sha, pattern)
    tables = build_enum_tables(sources)
    results = load_tables(tables, schema_name)
"""
import logging
from typing import Iterable, List, Optional

from .config import Settings
from .github import GitHubClient, get_sources
from .parser import parse_enum_declaration
from .schema import ENUM_COLUMNS, EnumTable, project_enum
from .storage import load_tables
from .storage.tables import LoadResult

logger = logging.getLogger(__name__)


def build_enum_tables(sources: Iterable[str]) -> List[EnumTable]:
    """
    Parse and project every source that declares a non-empty enum.

    Sources without an enum declaration, or whose declaration has no
    constants, are skipped.
    """
    tables = []
    for i, source in enumerate(sources):
        declaration = parse_enum_declaration(source)
        if declaration is None:
            logger.debug(f"Source #{i} has no enum declaration")
            continue
        if not declaration.values:
            logger.debug(f"Enum {declaration.name} has no values, skipping")
            continue
        tables.append(project_enum(declaration, ENUM_COLUMNS))
    return tables


def sync_commit(
    owner: str,
    repo: str,
    commit_sha: str,
    settings: Optional[Settings] = None,
    client: Optional[GitHubClient] = None,
) -> List[LoadResult]:
    """Fetch enum sources at a commit and replace their tables."""
    settings = settings or Settings.from_env()
    client = client or GitHubClient.from_settings(settings)

    sources = get_sources(client, owner, repo, commit_sha, settings.source_pattern)
    tables = build_enum_tables(sources)
    logger.info(f"{len(tables)} of {len(sources)} sources declare enums")

    return load_tables(tables, settings.target_schema)
