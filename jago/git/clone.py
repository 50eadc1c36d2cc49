import logging
from pathlib import Path

from dulwich import porcelain

from jago.config import Workspace
from jago.git.exceptions import CloneError
from jago.git.resolve import get_destination_dir

logger = logging.getLogger(__name__)


def clone_repo(workspace: Workspace, remote: str) -> Path:
    """
    Clone a remote repository into its Go-style place in the workspace.

    Missing parent directories of the destination are created here, the
    destination itself by the git client. A destination that exists and is
    not an empty directory is refused. Nothing is retried, and files left
    behind by a failed clone are not removed.

    Args:
        workspace: Workspace to clone into
        remote: Remote repository reference (URL or SCP-shorthand)

    Returns:
        Path to the cloned repository

    Raises:
        RemoteParseError: If the remote cannot be parsed
        InvalidRemoteError: If the remote has no host or repository path
        CloneError: If the destination is taken or the git client fails
    """
    dest = get_destination_dir(workspace, remote)
    logger.info(f"Cloning to {dest}...")

    try:
        # dulwich checks out over whatever is already there
        if dest.exists() and (not dest.is_dir() or any(dest.iterdir())):
            raise FileExistsError(
                f"destination path '{dest}' already exists and is not an empty directory"
            )
        dest.parent.mkdir(parents=True, exist_ok=True)
        porcelain.clone(remote, str(dest))
    except Exception as e:
        logger.debug(f"Clone of {remote} failed: {e!r}")
        raise CloneError(remote, dest, e) from e

    return dest
