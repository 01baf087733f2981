"""Command-line entry point for express-scaffold.

Each sub-command maps to exactly one scaffold operation::

    express-scaffold new        # folders + empty index.js
    express-scaffold server     # Express server in index.js
    express-scaffold route-s    # routes/app.js
    express-scaffold model-s    # models/<Name>.js
    express-scaffold package    # npm install the server dependencies
    express-scaffold version    # same as -v / --version
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable
from pathlib import Path

from express_scaffold import __version__
from express_scaffold.config import Config
from express_scaffold.errors import ScaffoldError
from express_scaffold.installer import NpmInstaller
from express_scaffold.prompts import RichChoiceProvider
from express_scaffold.scaffolder.emitter import Emitter
from express_scaffold.scaffolder.models import EmissionResult, Outcome
from express_scaffold.scaffolder.operations import (
    DB_TYPE,
    MODEL_NAME,
    generate_model_stub,
    generate_route_stub,
    generate_server,
    initialize_structure,
    install_dependencies,
)
from express_scaffold.scaffolder.templates import TemplateRegistry
from express_scaffold.utils import (
    console,
    print_error,
    print_info,
    print_success,
    print_summary_table,
    print_warning,
)


# ---------------------------------------------------------------------------
# Reporting
# ---------------------------------------------------------------------------


def _display_name(result: EmissionResult, base_dir: Path) -> str:
    try:
        return result.path.relative_to(base_dir).as_posix()
    except ValueError:
        return str(result.path)


def _report(
    results: list[EmissionResult],
    base_dir: Path,
    created: Callable[[str], str],
    skipped: Callable[[str], str],
) -> int:
    """Print one line per result; return the exit status for the batch."""
    status = 0
    for result in results:
        name = _display_name(result, base_dir)
        if result.outcome is Outcome.CREATED:
            print_success(created(name))
        elif result.outcome is Outcome.SKIPPED_ALREADY_EXISTS:
            print_warning(skipped(name))
        else:
            print_error(result.reason or f"Failed to create {name}")
            status = 1
    return status


def _describe_new(name: str, created: bool) -> str:
    if name == "index.js":
        return "Created File: index.js" if created else "index.js already exists in the root directory."
    return f"Created folder: {name}" if created else f"Folder {name} already exists"


# ---------------------------------------------------------------------------
# Command handlers
# ---------------------------------------------------------------------------


def _emitter(config: Config) -> Emitter:
    return Emitter(
        TemplateRegistry(port=config.port),
        fill_placeholders=config.fill_placeholders,
    )


def cmd_new(args: argparse.Namespace, config: Config) -> int:
    base = config.resolved_base_dir
    results = initialize_structure(base, _emitter(config))
    status = _report(
        results,
        base,
        created=lambda name: _describe_new(name, True),
        skipped=lambda name: _describe_new(name, False),
    )
    print_summary_table(
        [(_display_name(r, base), r.outcome.value) for r in results],
        title="Project structure",
    )
    return status


def cmd_server(args: argparse.Namespace, config: Config) -> int:
    base = config.resolved_base_dir
    choices = RichChoiceProvider({DB_TYPE: args.db})
    results = generate_server(base, choices, _emitter(config))
    return _report(
        results,
        base,
        created=lambda name: f"Server code written to {base / name}",
        skipped=lambda name: f"{name} already has content; left unchanged.",
    )


def cmd_route(args: argparse.Namespace, config: Config) -> int:
    base = config.resolved_base_dir
    results = generate_route_stub(base, _emitter(config))
    return _report(
        results,
        base,
        created=lambda name: "Successfully created 'app.js' in the 'routes' folder.",
        skipped=lambda name: f"{name} already exists; left unchanged.",
    )


def cmd_model(args: argparse.Namespace, config: Config) -> int:
    base = config.resolved_base_dir
    choices = RichChoiceProvider({DB_TYPE: args.db, MODEL_NAME: args.name})
    results = generate_model_stub(base, choices, _emitter(config))
    return _report(
        results,
        base,
        created=lambda name: f"Successfully created {Path(name).name} in the 'models' folder.",
        skipped=lambda name: f"{name} already exists; left unchanged.",
    )


def cmd_package(args: argparse.Namespace, config: Config) -> int:
    installer = NpmInstaller(config.resolved_base_dir, npm_command=config.npm_command)
    print_info("Installing server dependencies...")
    result = install_dependencies(installer, config.packages)
    if result.message:
        console.print(result.message, markup=False, highlight=False)
    print_success("Server dependencies installed successfully!")
    return 0


def cmd_version(args: argparse.Namespace, config: Config) -> int:
    console.print(__version__, markup=False, highlight=False)
    return 0


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="express-scaffold",
        description="Scaffold a minimal Express backend: folders, server, routes and models.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  express-scaffold new\n"
            "  express-scaffold server --db MongoDB\n"
            "  express-scaffold -C ./api model-s --db MySQL --name User\n"
        ),
    )
    parser.add_argument(
        "-v", "--version",
        action="version",
        version=__version__,
        help="Output the current version",
    )
    parser.add_argument(
        "--dir", "-C",
        default=None,
        help="Project directory to scaffold into (default: current directory)",
    )

    sub = parser.add_subparsers(dest="command", metavar="<command>")
    sub.required = True

    p = sub.add_parser("new", help="Create a new folder structure for an Express app")
    p.set_defaults(handler=cmd_new)

    p = sub.add_parser("server", help="Create a basic express server")
    p.add_argument("--db", default=None, help="Database type: MongoDB or MySQL (prompted if omitted)")
    p.set_defaults(handler=cmd_server)

    p = sub.add_parser("route-s", help="Create a sample file for routes")
    p.set_defaults(handler=cmd_route)

    p = sub.add_parser("model-s", help="Create a sample file for models")
    p.add_argument("--db", default=None, help="Database type: MongoDB or MySQL (prompted if omitted)")
    p.add_argument("--name", default=None, help="Model name, e.g. User (prompted if omitted)")
    p.set_defaults(handler=cmd_model)

    p = sub.add_parser("package", help="Install required packages for the Express server")
    p.set_defaults(handler=cmd_package)

    p = sub.add_parser("version", help="Check package version")
    p.set_defaults(handler=cmd_version)

    return parser


def run(argv: list[str] | None = None) -> int:
    """Parse *argv*, run the selected command and return its exit status."""
    args = build_parser().parse_args(argv)
    config = Config.from_env(base_dir=Path(args.dir) if args.dir else None)

    try:
        return args.handler(args, config)
    except ScaffoldError as exc:
        print_error(str(exc))
        return 1
    except KeyboardInterrupt:
        print_warning("Aborted.")
        return 130


def main() -> None:
    """CLI entry point for ``express-scaffold`` and ``python -m express_scaffold``."""
    sys.exit(run())


if __name__ == "__main__":
    main()
