"""appforge command line.

Usage::

    appforge new [PROJECT] [TEMPLATE] [--force] [--testapp NAME]
    python -m appforge new ./MyProject --testapp ui/tableview
"""

from __future__ import annotations

import argparse

from pydantic import ValidationError

from appforge import __version__
from appforge.config import Config, ScaffoldOptions
from appforge.scaffolder import ProjectScaffolder, ScaffoldError
from appforge.utils import print_error, print_summary_table


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="appforge",
        description="appforge -- convert a classic project into an app project",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  appforge new\n"
            "  appforge new ./MyProject --force\n"
            "  appforge new ./MyProject --testapp ui/tableview\n"
        ),
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    new = subparsers.add_parser("new", help="Create the app layout in an existing project")
    new.add_argument(
        "project",
        nargs="?",
        default=".",
        help="Path to the project (default: current directory)",
    )
    new.add_argument(
        "template",
        nargs="?",
        default="default",
        help="Project template name (default: default)",
    )
    new.add_argument(
        "--force", "-f",
        action="store_true",
        help="Overwrite an existing app directory",
    )
    new.add_argument(
        "--testapp",
        default=None,
        metavar="NAME",
        help="Use a sample app (e.g. ui/tableview) as the template",
    )
    return parser


def run_new(args: argparse.Namespace, config: Config) -> int:
    """Handle ``appforge new``."""
    try:
        options = ScaffoldOptions(
            force=args.force,
            testapp=args.testapp,
            template_name=args.template,
        )
    except ValidationError as exc:
        print_error(f"Invalid arguments: {exc}")
        return 1

    scaffolder = ProjectScaffolder(config)
    try:
        app = scaffolder.create(args.project, options)
    except ScaffoldError as exc:
        print_error(str(exc))
        return 1

    print_summary_table(
        {
            "Project": str(app.parent),
            "App": str(app),
            "Template": options.testapp or options.template_name,
        },
        title="appforge new",
    )
    return 0


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for ``appforge``."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = Config.from_env()
    except ValidationError as exc:
        print_error(f"Invalid configuration: {exc}")
        return 1

    if args.command == "new":
        return run_new(args, config)

    parser.print_help()
    return 1
