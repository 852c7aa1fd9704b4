"""
Serve command - run the webhook endpoint.
"""
import click
import uvicorn

from enumwarp.api import create_app


@click.command('serve')
@click.option('--host', default='127.0.0.1', show_default=True)
@click.option('--port', default=8080, show_default=True, type=int)
def serve_command(host: str, port: int):
    """Serve POST /github for GitHub push webhooks."""
    uvicorn.run(create_app(), host=host, port=port)
