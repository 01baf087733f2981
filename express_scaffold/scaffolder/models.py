"""Value types shared by the scaffolding engine.

``ScaffoldRequest`` describes one artifact to emit; ``EmissionResult``
reports what happened to it.  Both are built fresh per operation and never
persisted.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from express_scaffold.errors import InvalidParameterError


class ArtifactKind(str, Enum):
    """Which template and placement rules apply to an artifact."""

    STRUCTURE_FOLDER = "structure_folder"
    BOOTSTRAP_FILE = "bootstrap_file"
    ROUTE_AGGREGATOR = "route_aggregator"
    MODEL_FILE = "model_file"


class BackendVariant(str, Enum):
    """Persistence technology family selected by the user."""

    DOCUMENT_STORE = "mongodb"
    RELATIONAL_STORE = "mysql"

    @property
    def label(self) -> str:
        """Human-facing name shown in prompts (``MongoDB`` / ``MySQL``)."""
        return _VARIANT_LABELS[self]

    @classmethod
    def from_label(cls, value: str | None) -> "BackendVariant":
        """Resolve a prompt answer or CLI flag, case-insensitively.

        Accepts either the label (``MongoDB``) or the value (``mongodb``);
        anything else raises ``InvalidParameterError``.
        """
        needle = (value or "").strip().lower()
        for variant in cls:
            if needle in (variant.value, variant.label.lower()):
                return variant
        raise InvalidParameterError(
            "db_type",
            f"Unknown database type {value!r}; expected one of "
            + ", ".join(v.label for v in cls),
        )


_VARIANT_LABELS: dict[BackendVariant, str] = {
    BackendVariant.DOCUMENT_STORE: "MongoDB",
    BackendVariant.RELATIONAL_STORE: "MySQL",
}


class Outcome(str, Enum):
    CREATED = "created"
    SKIPPED_ALREADY_EXISTS = "skipped"
    FAILED = "failed"


class ScaffoldRequest(BaseModel):
    """One emission: what to write, for which backend, under which root."""

    model_config = ConfigDict(frozen=True)

    kind: ArtifactKind
    variant: BackendVariant | None = None
    base_dir: Path
    parameters: dict[str, str] = Field(default_factory=dict)


class EmissionResult(BaseModel):
    """Outcome of emitting a single artifact."""

    model_config = ConfigDict(frozen=True)

    path: Path
    outcome: Outcome
    reason: str = ""

    @property
    def created(self) -> bool:
        return self.outcome is Outcome.CREATED

    @property
    def skipped(self) -> bool:
        return self.outcome is Outcome.SKIPPED_ALREADY_EXISTS

    @property
    def failed(self) -> bool:
        return self.outcome is Outcome.FAILED
