"""Jinja2 template rendering for the generated Express project.

Provides the ``TemplateRenderer`` class, which loads Jinja2 templates from
the ``express_scaffold/scaffolder/templates/`` directory, and the
``TemplateRegistry``, which maps an ``(ArtifactKind, BackendVariant)`` pair
to one of those templates and validates the parameters interpolated into it.

Nothing in this module writes to disk.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from express_scaffold.errors import InvalidParameterError

from .models import ArtifactKind, BackendVariant


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"

ENTITY_NAME = "entity_name"

# Generated names double as JavaScript identifiers and file names.
_JS_IDENTIFIER = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")

# Reserved words (including strict-mode and literal ones) cannot name a binding.
_JS_RESERVED_WORDS: frozenset[str] = frozenset({
    "await", "break", "case", "catch", "class", "const", "continue", "debugger",
    "default", "delete", "do", "else", "enum", "export", "extends", "false",
    "finally", "for", "function", "if", "implements", "import", "in",
    "instanceof", "interface", "let", "new", "null", "package", "private",
    "protected", "public", "return", "static", "super", "switch", "this",
    "throw", "true", "try", "typeof", "var", "void", "while", "with", "yield",
    "arguments", "eval",
})

# Module-level names the model templates declare alongside the entity.
_TEMPLATE_BINDINGS: frozenset[str] = frozenset({"mongoose", "Sequelize", "DataTypes", "sequelize"})

# (kind, variant) -> template path. ``None`` variant means "variant-independent".
_TEMPLATES: dict[tuple[ArtifactKind, BackendVariant | None], str] = {
    (ArtifactKind.BOOTSTRAP_FILE, BackendVariant.DOCUMENT_STORE): "bootstrap/mongodb.js.j2",
    (ArtifactKind.BOOTSTRAP_FILE, BackendVariant.RELATIONAL_STORE): "bootstrap/mysql.js.j2",
    (ArtifactKind.ROUTE_AGGREGATOR, None): "routes/app.js.j2",
    (ArtifactKind.MODEL_FILE, BackendVariant.DOCUMENT_STORE): "model/mongodb.js.j2",
    (ArtifactKind.MODEL_FILE, BackendVariant.RELATIONAL_STORE): "model/mysql.js.j2",
}


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders Jinja2 templates for project scaffolding.

    The renderer loads ``.j2`` template files from a configurable
    template directory.  Undefined variables raise instead of rendering as
    empty strings, so a missing parameter never produces broken code.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([]),
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"model/mongodb.js.j2"``).
            context: Dictionary of variables available inside the template.

        Returns:
            The rendered template content as a string.
        """
        template = self.env.get_template(template_path)
        return template.render(**context)


# ---------------------------------------------------------------------------
# TemplateRegistry
# ---------------------------------------------------------------------------


class TemplateRegistry:
    """Resolves artifact kinds to generated file content.

    Resolution is a pure function of ``(kind, variant, parameters)``: the
    same inputs always produce byte-identical text.
    """

    def __init__(self, renderer: TemplateRenderer | None = None, *, port: int = 4000) -> None:
        self.renderer = renderer or TemplateRenderer()
        self.port = port

    def validate(
        self,
        kind: ArtifactKind,
        variant: BackendVariant | None,
        parameters: Mapping[str, str],
    ) -> None:
        """Check that *parameters* are sufficient to resolve *kind*.

        Raises:
            InvalidParameterError: If the entity name of a model is missing,
                empty or not a usable identifier, or if a model is requested
                without a backend variant.
        """
        if kind is not ArtifactKind.MODEL_FILE:
            return
        validate_entity_name(parameters.get(ENTITY_NAME))
        if variant is None:
            raise InvalidParameterError(
                "variant", "A database type is required to generate a model."
            )

    def template_for(self, kind: ArtifactKind, variant: BackendVariant | None) -> str | None:
        """Return the template path for *kind*, or ``None`` when it has no content.

        Structure folders carry no content, and a bootstrap file without a
        variant is the empty placeholder written by ``new``.
        """
        if kind is ArtifactKind.ROUTE_AGGREGATOR:
            variant = None
        return _TEMPLATES.get((kind, variant))

    def resolve(
        self,
        kind: ArtifactKind,
        variant: BackendVariant | None,
        parameters: Mapping[str, str],
    ) -> str:
        """Render the content for one artifact."""
        self.validate(kind, variant, parameters)
        template_path = self.template_for(kind, variant)
        if template_path is None:
            return ""

        context: dict[str, Any] = {"port": self.port}
        if ENTITY_NAME in parameters:
            context[ENTITY_NAME] = parameters[ENTITY_NAME].strip()
        return self.renderer.render(template_path, context)


def validate_entity_name(value: str | None) -> str:
    """Return the stripped entity name, or raise ``InvalidParameterError``."""
    name = (value or "").strip()
    if not name:
        raise InvalidParameterError(ENTITY_NAME, "Model name cannot be empty.")
    if not _JS_IDENTIFIER.match(name):
        raise InvalidParameterError(
            ENTITY_NAME,
            f"Model name {name!r} must be a valid JavaScript identifier "
            "(letters, digits, '_' or '$', not starting with a digit).",
        )
    if name in _JS_RESERVED_WORDS:
        raise InvalidParameterError(
            ENTITY_NAME,
            f"Model name {name!r} is a reserved word in JavaScript.",
        )
    if name in _TEMPLATE_BINDINGS:
        raise InvalidParameterError(
            ENTITY_NAME,
            f"Model name {name!r} clashes with a name the generated model already declares.",
        )
    return name


def resolve_template(
    kind: ArtifactKind,
    variant: BackendVariant | None,
    parameters: Mapping[str, str],
) -> str:
    """Module-level shortcut for ``TemplateRegistry().resolve(...)``."""
    return TemplateRegistry().resolve(kind, variant, parameters)
