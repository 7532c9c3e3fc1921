"""
Path resolution - URIs to normalized paths, paths to project roots.

Normalized paths are absolute, collapsed (no '.' or '..') and use forward
slashes. They are the only keys the registry ever sees.
"""

import os
from typing import Iterator, Optional
from urllib.parse import unquote, urlparse, quote

from config import MARKER_FILENAME, DOCUMENT_SUFFIX
from .errors import InvalidUriError


def normalize_path(path) -> str:
    """Absolute, collapsed, forward-slash form of a filesystem path."""
    normalized = os.path.normpath(os.path.abspath(os.fspath(path)))
    if os.sep != "/":
        normalized = normalized.replace(os.sep, "/")
    return normalized


def to_path(uri: str) -> str:
    """
    Convert a file:// URI to a normalized path.

    This is the only way external URIs enter the core.

    Raises:
        InvalidUriError: not a file URI, or no usable path in it
    """
    if not isinstance(uri, str) or not uri:
        raise InvalidUriError(str(uri), "empty")

    parsed = urlparse(uri)
    if parsed.scheme != "file":
        raise InvalidUriError(uri, f"unsupported scheme {parsed.scheme or '(none)'!r}")

    path_str = unquote(parsed.path or "")

    # UNC paths: file://server/share/path -> //server/share/path
    if parsed.netloc and parsed.netloc != "localhost":
        path_str = f"//{parsed.netloc}{path_str}"

    # Windows drive: /d:/path -> d:/path
    if len(path_str) >= 3 and path_str[0] == "/" and path_str[2] == ":":
        path_str = path_str[1:]

    if not path_str or not (path_str.startswith("/") or path_str[1:2] == ":"):
        raise InvalidUriError(uri, "path must be absolute")

    return normalize_path(path_str)


def to_uri(path: str) -> str:
    """Inverse of to_path for normalized paths."""
    normalized = normalize_path(path)
    if not normalized.startswith("/"):
        # Drive-letter path
        normalized = "/" + normalized
    return "file://" + quote(normalized, safe="/:")


def is_document_path(path: str) -> bool:
    """True if path names a WooWoo document (literal .woo suffix)."""
    return path.endswith(DOCUMENT_SUFFIX)


def is_marker_path(path: str) -> bool:
    """True if path names a project marker file."""
    return os.path.basename(path) == MARKER_FILENAME


def is_within(path: str, directory: str) -> bool:
    """True if path is directory itself or lies somewhere below it."""
    if path == directory:
        return True
    prefix = directory if directory.endswith("/") else directory + "/"
    return path.startswith(prefix)


def iter_ancestors(path: str, workspace_root: Optional[str] = None) -> Iterator[str]:
    """
    Yield the directories above path, nearest first.

    Stops after the workspace root when one is given (its parent is never
    yielded), and always stops at the filesystem root.
    """
    parent = os.path.dirname(path)
    stop = os.path.dirname(workspace_root) if workspace_root else None

    while parent != stop:
        yield parent
        grandparent = os.path.dirname(parent)
        if grandparent == parent:
            break
        parent = grandparent


def find_enclosing_project_root(path: str, workspace_root: Optional[str] = None) -> Optional[str]:
    """
    Nearest directory above path that contains a Woofile.

    The walk starts at path's parent and stops at the first match, so a
    document inside a nested project resolves to the nested root. Returns
    None when nothing matches before passing the workspace root.
    """
    for directory in iter_ancestors(path, workspace_root):
        if os.path.isfile(os.path.join(directory, MARKER_FILENAME)):
            return directory
    return None
