"""
enumwarp CLI

Commands:
    parse   Show the tables local enum source files would produce
    sync    Load the enums of one commit into PostgreSQL
    serve   Run the GitHub webhook endpoint
"""
import logging

import click

from enumwarp.cli.parse import parse_command
from enumwarp.cli.serve import serve_command
from enumwarp.cli.sync import sync_command


@click.group()
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging')
def cli(verbose: bool):
    """enumwarp - Java enum to PostgreSQL table sync"""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)


cli.add_command(parse_command)
cli.add_command(sync_command)
cli.add_command(serve_command)


if __name__ == '__main__':
    cli()
