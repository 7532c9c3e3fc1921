"""
Exceptions raised by the project core.

Not-found is deliberately absent: a missing document, project or root is
never an error, callers fall back to the catch-all project or do nothing.
"""


class WooWooError(Exception):
    """Base for all core errors."""


class InvalidUriError(WooWooError, ValueError):
    """A URI that cannot be turned into a filesystem path."""

    def __init__(self, uri: str, reason: str):
        self.uri = uri
        self.reason = reason
        super().__init__(f"Invalid document URI {uri!r}: {reason}")


class WorkspaceLoadError(WooWooError):
    """Scanning the workspace failed. The previous registry state is kept."""

    def __init__(self, workspace_root: str, reason: str):
        self.workspace_root = workspace_root
        self.reason = reason
        super().__init__(f"Failed to load workspace {workspace_root}: {reason}")


class RegistryInvariantError(WooWooError):
    """Project membership is inconsistent."""
