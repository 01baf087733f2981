"""Target locations for generated artifacts.

Pure path arithmetic; nothing here touches the filesystem.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

from express_scaffold.errors import InvalidParameterError

from .models import ArtifactKind
from .templates import ENTITY_NAME, validate_entity_name

STRUCTURE_FOLDERS: tuple[str, ...] = ("controllers", "routes", "models", "services", "middleware")

FOLDER = "folder"
BOOTSTRAP_FILENAME = "index.js"
ROUTE_AGGREGATOR_FILENAME = "app.js"

_REQUIRED_FOLDERS: dict[ArtifactKind, str] = {
    ArtifactKind.ROUTE_AGGREGATOR: "routes",
    ArtifactKind.MODEL_FILE: "models",
}


def required_folder(kind: ArtifactKind) -> str | None:
    """Structural folder that must exist before *kind* can be emitted."""
    return _REQUIRED_FOLDERS.get(kind)


def plan_path(base_dir: str | Path, kind: ArtifactKind, parameters: Mapping[str, str]) -> Path:
    """Return the absolute target path of an artifact under *base_dir*.

    Layout::

        <base>/{controllers,routes,models,services,middleware}/
        <base>/index.js
        <base>/routes/app.js
        <base>/models/<EntityName>.js

    Raises:
        InvalidParameterError: If a structure folder name or model entity
            name is missing or not part of the convention.
    """
    base = Path(base_dir).absolute()

    if kind is ArtifactKind.STRUCTURE_FOLDER:
        folder = parameters.get(FOLDER, "")
        if folder not in STRUCTURE_FOLDERS:
            raise InvalidParameterError(
                FOLDER,
                f"Unknown structure folder {folder!r}; expected one of "
                + ", ".join(STRUCTURE_FOLDERS),
            )
        return base / folder
    if kind is ArtifactKind.BOOTSTRAP_FILE:
        return base / BOOTSTRAP_FILENAME
    if kind is ArtifactKind.ROUTE_AGGREGATOR:
        return base / "routes" / ROUTE_AGGREGATOR_FILENAME
    if kind is ArtifactKind.MODEL_FILE:
        name = validate_entity_name(parameters.get(ENTITY_NAME))
        return base / "models" / f"{name}.js"

    raise ValueError(f"Unsupported artifact kind: {kind!r}")
