"""
Exception classes for resolving and cloning remote repositories.
"""


class JagoError(Exception):
    """Base exception for all clone-related errors."""

    pass


class RemoteParseError(JagoError):
    """Raised when a remote reference cannot be parsed as a URL."""

    def __init__(self, remote: str, message: str):
        self.remote = remote
        super().__init__(message)


class InvalidRemoteError(JagoError):
    """Raised when a remote parses but lacks a host or a repository path."""

    def __init__(self, remote: str):
        self.remote = remote
        super().__init__("invalid remote repository url")


class CloneError(JagoError):
    """Raised when the git client fails to clone a remote."""

    def __init__(self, remote: str, destination, cause: Exception):
        self.remote = remote
        self.destination = destination
        self.cause = cause
        super().__init__(str(cause) or type(cause).__name__)
