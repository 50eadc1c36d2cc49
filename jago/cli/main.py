"""jago CLI"""

import sys

import click

from jago import __version__
from jago.cli.utils.logging import logger
from jago.config import ConfigurationError, get_workspace
from jago.git import JagoError, clone_repo

from .debug import add_debug_option


@click.command(name="jago")
@click.version_option(__version__, prog_name="jago")
@click.argument("remote", type=click.STRING)
@click.pass_context
def cli(ctx, remote: str):
    """
    Clone REMOTE into the workspace under its host and path.

    REMOTE is a repository URL or SCP-style shorthand:

      jago https://github.com/xi-editor/xi-editor.git

      jago git@github.com:xi-editor/xi-editor.git

    Both clone to ~/src/github.com/xi-editor/xi-editor.
    """
    ctx.ensure_object(dict)

    try:
        workspace = get_workspace()
    except ConfigurationError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(1)

    logger.debug(f"Workspace root: {workspace.root}")

    try:
        repo_path = clone_repo(workspace, remote)
    except JagoError as e:
        click.echo(f"Failed to clone {remote}. Error: {e}", err=True)
        sys.exit(1)

    click.echo(f"Repository successfully cloned to {repo_path}")


add_debug_option(cli)

if __name__ == "__main__":
    cli(obj={})
