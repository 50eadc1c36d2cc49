"""
Derive Go-style workspace paths from remote repository references.

Both accepted remote forms converge on one RemoteLocation:

    https://github.com/user/repo.git   -> github.com, user/repo.git
    git@github.com:user/repo.git       -> github.com, user/repo.git

which is then placed under the workspace root with the extension of the
final component removed:

    <root>/github.com/user/repo

Nothing in this module touches the filesystem.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Union
from urllib.parse import urlsplit

from jago.config import Workspace
from jago.git.exceptions import InvalidRemoteError, RemoteParseError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RemoteLocation:
    """Host and repository path of a remote, path without leading separator."""

    host: str
    path: str

    @property
    def segments(self) -> list:
        return [segment for segment in self.path.split("/") if segment]


def normalize_remote(remote: str) -> str:
    """
    Rewrite SCP-style shorthand into an ssh:// URL.

    `user@host:path` is not a valid URL, so it becomes `ssh://user@host/path`.
    The rewrite only applies when the remote has no `://` and has a `:` after
    its `@`; anything else is returned unchanged.

    Args:
        remote: Remote repository reference

    Returns:
        A string suitable for the standard URL parser
    """
    if "://" in remote:
        return remote

    at = remote.find("@")
    if at == -1:
        return remote

    # git@[::1]:repo - the host colons are inside the brackets
    start = at
    if remote.startswith("[", at + 1):
        start = remote.find("]", at)
        if start == -1:
            return remote

    colon = remote.find(":", start)
    if colon == -1:
        return remote

    user_host, path = remote[:colon], remote[colon + 1 :]
    return f"ssh://{user_host}/{path.lstrip('/')}"


def parse_remote(remote: str) -> RemoteLocation:
    """
    Parse a remote reference in URL or SCP-shorthand form.

    Args:
        remote: Remote repository reference

    Returns:
        The host and repository path of the remote

    Raises:
        RemoteParseError: If the URL parser rejects the remote
        InvalidRemoteError: If the remote has no host or no repository path
    """
    try:
        parts = urlsplit(normalize_remote(remote))
        host = parts.hostname
        # Accessing the port validates it
        parts.port
    except ValueError as e:
        raise RemoteParseError(remote, str(e)) from e

    if not host:
        raise InvalidRemoteError(remote)

    path = parts.path.strip("/")
    if not path:
        raise InvalidRemoteError(remote)

    return RemoteLocation(host=host, path=path)


def resolve(root: Union[str, Path], remote: str) -> Path:
    """
    Compute the destination directory of a remote under a workspace root.

    Examples:
        resolve("/tmp", "https://github.com/xi-editor/xi-editor.git")
            -> /tmp/github.com/xi-editor/xi-editor
        resolve("/tmp", "git@github.com:xi-editor/xi-editor.git")
            -> /tmp/github.com/xi-editor/xi-editor
        resolve("/tmp", "https://example.com/group/sub/project")
            -> /tmp/example.com/group/sub/project

    Any trailing extension of the last component is removed, not only `.git`
    (`my.project` becomes `my`). `..` segments and symlinks are left as is.

    Args:
        root: Workspace root directory
        remote: Remote repository reference

    Returns:
        Destination path of the clone
    """
    location = parse_remote(remote)
    dest = Path(root).joinpath(location.host, *location.segments).with_suffix("")
    logger.debug(f"Resolved {remote} to {dest}")
    return dest


def get_destination_dir(workspace: Workspace, remote: str) -> Path:
    return resolve(workspace.root, remote)
