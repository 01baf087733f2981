"""Named scaffold operations built on the :class:`Emitter`.

Each operation is a plain function of its inputs plus what is on disk at
call time.  Operations that emit files return one ``EmissionResult`` per
artifact; a failure in one artifact never rolls back the others.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from express_scaffold.config import DEFAULT_PACKAGES
from express_scaffold.errors import InstallerFailureError
from express_scaffold.installer import DependencyInstaller, InstallResult
from express_scaffold.prompts import ChoiceProvider, Question, QuestionKind, non_empty

from .emitter import Emitter
from .models import ArtifactKind, BackendVariant, EmissionResult, ScaffoldRequest
from .paths import FOLDER, STRUCTURE_FOLDERS
from .preconditions import check_preconditions
from .templates import ENTITY_NAME, validate_entity_name

DB_TYPE = "db_type"
MODEL_NAME = "model_name"

_VARIANT_OPTIONS = tuple(v.label for v in BackendVariant)


def _db_question(prompt: str) -> Question:
    return Question(
        key=DB_TYPE,
        prompt=prompt,
        kind=QuestionKind.SINGLE_CHOICE,
        options=_VARIANT_OPTIONS,
    )


SERVER_QUESTIONS: tuple[Question, ...] = (_db_question("Choose a database type"),)

MODEL_QUESTIONS: tuple[Question, ...] = (
    _db_question("Select the type of database model to create"),
    Question(
        key=MODEL_NAME,
        prompt="Enter the model name (e.g., User)",
        validator=non_empty("Model name cannot be empty."),
    ),
)


def initialize_structure(base_dir: str | Path, emitter: Emitter | None = None) -> list[EmissionResult]:
    """Create the five structural folders and an empty ``index.js``."""
    emitter = emitter or Emitter()
    base = Path(base_dir)

    requests = [
        ScaffoldRequest(
            kind=ArtifactKind.STRUCTURE_FOLDER,
            base_dir=base,
            parameters={FOLDER: folder},
        )
        for folder in STRUCTURE_FOLDERS
    ]
    requests.append(ScaffoldRequest(kind=ArtifactKind.BOOTSTRAP_FILE, base_dir=base))
    return [emitter.emit(request) for request in requests]


def generate_server(
    base_dir: str | Path,
    choices: ChoiceProvider,
    emitter: Emitter | None = None,
) -> list[EmissionResult]:
    """Ask for a database type and write the matching ``index.js``."""
    emitter = emitter or Emitter()
    answers = choices.ask(SERVER_QUESTIONS)
    variant = BackendVariant.from_label(answers.get(DB_TYPE))

    request = ScaffoldRequest(
        kind=ArtifactKind.BOOTSTRAP_FILE,
        variant=variant,
        base_dir=Path(base_dir),
    )
    return [emitter.emit(request)]


def generate_route_stub(base_dir: str | Path, emitter: Emitter | None = None) -> list[EmissionResult]:
    """Write ``routes/app.js``; requires the ``routes`` folder."""
    emitter = emitter or Emitter()
    request = ScaffoldRequest(kind=ArtifactKind.ROUTE_AGGREGATOR, base_dir=Path(base_dir))
    return [emitter.emit(request)]


def generate_model_stub(
    base_dir: str | Path,
    choices: ChoiceProvider,
    emitter: Emitter | None = None,
) -> list[EmissionResult]:
    """Ask for a database type and model name and write ``models/<Name>.js``.

    The ``models`` folder is checked before prompting so the user is not
    asked questions for a model that cannot be written.

    Raises:
        MissingDependencyError: If ``models/`` does not exist.
        InvalidParameterError: If the model name is empty or not a valid
            identifier.
    """
    emitter = emitter or Emitter()
    check_preconditions(ArtifactKind.MODEL_FILE, base_dir)

    answers = choices.ask(MODEL_QUESTIONS)
    variant = BackendVariant.from_label(answers.get(DB_TYPE))
    entity_name = validate_entity_name(answers.get(MODEL_NAME))

    request = ScaffoldRequest(
        kind=ArtifactKind.MODEL_FILE,
        variant=variant,
        base_dir=Path(base_dir),
        parameters={ENTITY_NAME: entity_name},
    )
    return [emitter.emit(request)]


def install_dependencies(
    installer: DependencyInstaller,
    packages: Sequence[str] = DEFAULT_PACKAGES,
) -> InstallResult:
    """Install *packages* through *installer*; no retry.

    Raises:
        InstallerFailureError: Carrying the installer's message verbatim.
    """
    result = installer.install(list(packages))
    if not result.ok:
        raise InstallerFailureError(result.message)
    return result
