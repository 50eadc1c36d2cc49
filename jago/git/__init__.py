"""
Git operations for jago.

Repositories are cloned into a Go-style workspace:

    ~/src/{host}/{org}/{repo}/

The destination is derived from the remote alone (see `resolve`), and the
clone itself is delegated to dulwich.
"""

from .clone import clone_repo
from .exceptions import CloneError, InvalidRemoteError, JagoError, RemoteParseError
from .resolve import (
    RemoteLocation,
    get_destination_dir,
    normalize_remote,
    parse_remote,
    resolve,
)

__all__ = [
    "clone_repo",
    "CloneError",
    "InvalidRemoteError",
    "JagoError",
    "RemoteParseError",
    "RemoteLocation",
    "get_destination_dir",
    "normalize_remote",
    "parse_remote",
    "resolve",
]
