"""Structural checks run before an artifact is emitted."""

from __future__ import annotations

from pathlib import Path

from express_scaffold.errors import MissingDependencyError

from .models import ArtifactKind
from .paths import required_folder


def check_preconditions(kind: ArtifactKind, base_dir: str | Path) -> None:
    """Raise ``MissingDependencyError`` if *kind* needs a folder that is absent.

    The folder is never created here: ``new`` must have run first.
    """
    folder = required_folder(kind)
    if folder is None:
        return
    if not (Path(base_dir) / folder).is_dir():
        raise MissingDependencyError(folder)
