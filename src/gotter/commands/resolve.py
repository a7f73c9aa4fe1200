"""Resolve a command's reference argument into project locations."""

from __future__ import annotations

from ..errors import InvalidReferenceError
from ..models import GotterConfig
from ..paths import ResolvedLocations, resolve
from ..refs import normalize


def ssh_user_for(args: object, settings: GotterConfig) -> str:
    """Return ``args.ssh_user`` when given, else the configured SSH user."""
    return str(getattr(args, "ssh_user", "") or "").strip() or settings.ssh_user


def resolve_reference(
    args: object, settings: GotterConfig
) -> tuple[str, ResolvedLocations]:
    """Return the canonical path and locations for ``args.reference``."""
    reference = str(getattr(args, "reference", "") or "").strip()
    if not reference:
        raise InvalidReferenceError("a repository reference is required")
    pkgpath = normalize(reference)
    locations = resolve(
        pkgpath,
        ssh_user_for(args, settings),
        settings.root_dir,
        settings.workspace_dir,
    )
    return pkgpath, locations
