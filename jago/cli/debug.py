from functools import wraps

import click

from .utils.logging import configure_logging


def add_debug_option(cmd):
    """Decorator to add the --debug/--no-debug option to a command"""
    if isinstance(cmd, click.Command):
        if not any(param.name == "debug" for param in cmd.params):
            cmd.params.insert(
                0,
                click.Option(
                    ["--debug/--no-debug"],
                    is_eager=True,
                    expose_value=False,
                    callback=lambda ctx, param, value: _set_debug(ctx, value),
                    help="Enable debug mode",
                ),
            )
        return cmd

    # For functions that will become commands
    @click.option(
        "--debug/--no-debug",
        is_eager=True,
        expose_value=False,
        callback=lambda ctx, param, value: _set_debug(ctx, value),
        help="Enable debug mode",
    )
    @wraps(cmd)
    def wrapper(*args, **kwargs):
        return cmd(*args, **kwargs)

    return wrapper


def _set_debug(ctx, value: bool):
    """Callback function for debug flag"""
    ctx.ensure_object(dict)
    ctx.obj["DEBUG"] = value

    configure_logging(value)
    return value
