"""
Sync command - load the enums of one commit into PostgreSQL.
"""
import click
import requests
from rich.markup import escape

from enumwarp.cli.console import console
from enumwarp.cli.display import display_enum_table
from enumwarp.config import Settings
from enumwarp.github import GitHubClient, get_sources
from enumwarp.storage import load_tables
from enumwarp.sync import build_enum_tables
from enumwarp.utils import qualified_table_name


@click.command('sync')
@click.option('--owner', required=True, help='Repository owner')
@click.option('--repo', required=True, help='Repository name')
@click.option('--sha', required=True, help='Commit SHA to read enums from')
@click.option('--dry-run', is_flag=True, help='Show parsed tables without loading')
def sync_command(owner: str, repo: str, sha: str, dry_run: bool):
    """Fetch enum sources at a commit and replace their tables."""
    settings = Settings.from_env()
    client = GitHubClient.from_settings(settings)

    console.print(f"\n[info]Syncing:[/] {owner}/{repo}@{sha}")
    console.print(f"[muted]Pattern: {settings.source_pattern}[/]")

    try:
        with console.status("Fetching sources..."):
            sources = get_sources(client, owner, repo, sha, settings.source_pattern)
    except requests.RequestException as e:
        console.print(f"[error]Failed to fetch sources: {e}[/]")
        raise SystemExit(1)

    tables = build_enum_tables(sources)
    console.print(f"[info]{len(tables)} of {len(sources)} files declare enums[/]\n")

    if dry_run:
        for table in tables:
            display_enum_table(table, console)
        console.print("\n[muted]Dry run - no data loaded[/]")
        return

    failed = 0
    for table_id, result in load_tables(tables, settings.target_schema):
        name = qualified_table_name(settings.target_schema, table_id)
        if isinstance(result, int):
            console.print(f"  [success]o[/] {name}: {result} rows")
        else:
            failed += 1
            console.print(f"  [error]! {name}: {escape(result)}[/]")

    if failed:
        console.print(f"\n[error]{failed} table(s) failed to load[/]")
        raise SystemExit(1)
    console.print("\n[success]Sync complete[/]")
