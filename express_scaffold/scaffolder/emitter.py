"""Idempotent artifact emission.

The ``Emitter`` ties the registry, path planner and precondition checker
together and is the only place in the scaffolder that writes to disk.
Existing files and folders are never overwritten.
"""

from __future__ import annotations

from pathlib import Path

from express_scaffold.errors import MissingDependencyError

from .models import ArtifactKind, EmissionResult, Outcome, ScaffoldRequest
from .paths import plan_path
from .preconditions import check_preconditions
from .templates import TemplateRegistry


class Emitter:
    """Emits one artifact per :meth:`emit` call.

    Args:
        registry: Resolves artifact content. A default registry is built
            when omitted.
        fill_placeholders: When true, a variant-specific bootstrap request
            may write into an existing *empty* ``index.js`` (the placeholder
            left by ``new``).  Any non-empty file is still left untouched.
    """

    def __init__(
        self,
        registry: TemplateRegistry | None = None,
        *,
        fill_placeholders: bool = True,
    ) -> None:
        self.registry = registry or TemplateRegistry()
        self.fill_placeholders = fill_placeholders

    def emit(self, request: ScaffoldRequest) -> EmissionResult:
        """Emit the artifact described by *request*.

        Returns:
            ``CREATED`` when written, ``SKIPPED_ALREADY_EXISTS`` when the
            target is already present, ``FAILED`` when a required folder is
            missing or the write itself fails.

        Raises:
            InvalidParameterError: If the request parameters cannot produce
                a valid artifact. Raised before any filesystem access.
        """
        self.registry.validate(request.kind, request.variant, request.parameters)
        target = plan_path(request.base_dir, request.kind, request.parameters)

        placeholder = False
        try:
            check_preconditions(request.kind, request.base_dir)
            if target.exists() or target.is_symlink():
                placeholder = self._is_fillable_placeholder(request, target)
                if not placeholder:
                    return EmissionResult(path=target, outcome=Outcome.SKIPPED_ALREADY_EXISTS)

            if request.kind is ArtifactKind.STRUCTURE_FOLDER:
                target.mkdir(parents=True)
            else:
                content = self.registry.resolve(
                    request.kind, request.variant, request.parameters
                )
                _write_file(target, content, overwrite=placeholder)
        except MissingDependencyError as exc:
            return EmissionResult(path=target, outcome=Outcome.FAILED, reason=str(exc))
        except FileExistsError:
            return EmissionResult(path=target, outcome=Outcome.SKIPPED_ALREADY_EXISTS)
        except OSError as exc:
            return EmissionResult(
                path=target,
                outcome=Outcome.FAILED,
                reason=exc.strerror or str(exc),
            )

        return EmissionResult(path=target, outcome=Outcome.CREATED)

    def _is_fillable_placeholder(self, request: ScaffoldRequest, target: Path) -> bool:
        return (
            self.fill_placeholders
            and request.kind is ArtifactKind.BOOTSTRAP_FILE
            and request.variant is not None
            and target.is_file()
            and not target.is_symlink()
            and target.stat().st_size == 0
        )


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _write_file(path: Path, content: str, *, overwrite: bool = False) -> None:
    """Create parent dirs and write *content*; refuses to clobber unless *overwrite*."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w" if overwrite else "x", encoding="utf-8") as fh:
        fh.write(content)
