"""Template resolution and idempotent file emission for Express projects.

Quick usage::

    from express_scaffold.prompts import StaticChoiceProvider
    from express_scaffold.scaffolder import (
        generate_model_stub,
        generate_route_stub,
        initialize_structure,
    )

    initialize_structure("/tmp/api")
    generate_route_stub("/tmp/api")
    generate_model_stub(
        "/tmp/api",
        StaticChoiceProvider({"db_type": "MongoDB", "model_name": "Order"}),
    )
"""

from express_scaffold.scaffolder.emitter import Emitter
from express_scaffold.scaffolder.models import (
    ArtifactKind,
    BackendVariant,
    EmissionResult,
    Outcome,
    ScaffoldRequest,
)
from express_scaffold.scaffolder.operations import (
    generate_model_stub,
    generate_route_stub,
    generate_server,
    initialize_structure,
    install_dependencies,
)
from express_scaffold.scaffolder.paths import STRUCTURE_FOLDERS, plan_path
from express_scaffold.scaffolder.preconditions import check_preconditions
from express_scaffold.scaffolder.templates import (
    TemplateRegistry,
    TemplateRenderer,
    resolve_template,
)

__all__ = [
    "ArtifactKind",
    "BackendVariant",
    "EmissionResult",
    "Emitter",
    "Outcome",
    "STRUCTURE_FOLDERS",
    "ScaffoldRequest",
    "TemplateRegistry",
    "TemplateRenderer",
    "check_preconditions",
    "generate_model_stub",
    "generate_route_stub",
    "generate_server",
    "initialize_structure",
    "install_dependencies",
    "plan_path",
    "resolve_template",
]
