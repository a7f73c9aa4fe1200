"""Repository reference normalization.

Turns the reference forms accepted on the command line (bare import paths,
``http(s)://`` and ``git://`` URLs, SCP-style ``user@host:owner/repo``) into
one canonical ``host/path`` import path.

Example:
    >>> normalize("git@github.com:owner/repo.git")
    'github.com/owner/repo'
    >>> classify("https://github.com/owner/repo") is ReferenceKind.HTTPS
    True
"""

from __future__ import annotations

from enum import Enum
from urllib.parse import urlsplit

from .errors import InvalidReferenceError

GIT_SUFFIX = ".git"
SCHEME_SEPARATOR = "://"
_KNOWN_SCHEMES = ("http://", "https://", "git://")


class ReferenceKind(Enum):
    GOPKG = "gopkg"
    HTTP = "http"
    HTTPS = "https"
    GIT = "git"
    SSH = "ssh"


def strip_git_suffix(reference: str) -> str:
    """Remove one trailing ``.git`` suffix.

    Example:
        >>> strip_git_suffix("example.org/o/p.git")
        'example.org/o/p'
    """
    if reference.endswith(GIT_SUFFIX):
        return reference[: -len(GIT_SUFFIX)]
    return reference


def _replace_scp_colon(url: str) -> str:
    index = url.rfind(":")
    if index > 0 and index != url.find(SCHEME_SEPARATOR):
        return url[:index] + "/" + url[index + 1 :]
    return url


def normalize(reference: str) -> str:
    """Normalize a repository reference to its canonical import path.

    The SCP colon is rewritten to ``/`` before URL parsing because URL
    parsers treat it as a port separator. Only the last colon that is not
    part of the scheme is rewritten. Userinfo is dropped.

    Args:
        reference: Any accepted repository reference.

    Returns:
        ``host/path`` without scheme or ``.git`` suffix. A reference with no
        path yields the host alone.

    Raises:
        InvalidReferenceError: The reference cannot be parsed as a URL.

    Example:
        >>> normalize("example.org/o/p")
        'example.org/o/p'
        >>> normalize("https://example.org/o/p.git")
        'example.org/o/p'
        >>> normalize("example.org")
        'example.org'
    """
    url = strip_git_suffix(reference)
    if not url.startswith(_KNOWN_SCHEMES):
        url = "http://" + url
    url = _replace_scp_colon(url)
    try:
        parts = urlsplit(url)
    except ValueError as exc:
        raise InvalidReferenceError(
            f"invalid repository reference: {reference}"
        ) from exc
    host = parts.netloc.rpartition("@")[2]
    return host + parts.path


def classify(reference: str) -> ReferenceKind:
    """Classify a raw reference by its prefix or shape.

    Example:
        >>> classify("git://example.org/o/p").value
        'git'
        >>> classify("example.org/o/p").value
        'gopkg'
    """
    if reference.startswith("http://"):
        return ReferenceKind.HTTP
    if reference.startswith("https://"):
        return ReferenceKind.HTTPS
    if reference.startswith("git://"):
        return ReferenceKind.GIT
    if "@" in reference:
        return ReferenceKind.SSH
    return ReferenceKind.GOPKG


def needs_ssh_rewrite(current_url: str, ssh_url: str) -> bool:
    """Return whether ``current_url`` must be rewritten to ``ssh_url``.

    Example:
        >>> needs_ssh_rewrite("https://example.org/o/p", "git@example.org:o/p.git")
        True
        >>> needs_ssh_rewrite("git@example.org:o/p.git", "git@example.org:o/p.git")
        False
    """
    if classify(current_url) is not ReferenceKind.SSH:
        return True
    return current_url.strip() != ssh_url
