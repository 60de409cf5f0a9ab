"""CLI entrypoints for slnbridge commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .errors import ConfigError, GenerationError
from .integration import EditorIntegration
from .logging import configure_logging


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _add_path_option(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--path",
        default=".",
        help="Project root holding .slnbridge.yml (defaults to current directory).",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="slnbridge",
        description="Generate solution/project descriptors and open files in an external editor.",
    )
    _add_verbose_option(parser)
    parser.add_argument(
        "--log-file",
        default=None,
        help="Also write log records to this file.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    sync_parser = subparsers.add_parser(
        "sync",
        help="Regenerate every project descriptor and the solution descriptor.",
    )
    _add_verbose_option(sync_parser, suppress_default=True)
    sync_parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Path to the project root (defaults to current directory).",
    )

    open_parser = subparsers.add_parser(
        "open",
        help="Open the editor on the project, optionally at a file position.",
    )
    _add_verbose_option(open_parser, suppress_default=True)
    _add_path_option(open_parser)
    open_parser.add_argument("file", nargs="?", default=None, help="File to open.")
    open_parser.add_argument("--line", type=int, default=None, help="1-based line number.")
    open_parser.add_argument("--column", type=int, default=None, help="1-based column number.")
    open_parser.add_argument(
        "--installation",
        default=None,
        help="Editor executable or application bundle (overrides configuration).",
    )

    installations_parser = subparsers.add_parser(
        "installations",
        help="List editor installations found at the configured known paths.",
    )
    _add_verbose_option(installations_parser, suppress_default=True)
    _add_path_option(installations_parser)

    serve_parser = subparsers.add_parser(
        "serve",
        help="Run the HTTP service exposing sync and open operations.",
    )
    _add_verbose_option(serve_parser, suppress_default=True)
    _add_path_option(serve_parser)
    serve_parser.add_argument("--host", default=None, help="Bind address.")
    serve_parser.add_argument("--port", type=int, default=None, help="Bind port.")

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for slnbridge commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    log_file = Path(args.log_file) if args.log_file else None
    configure_logging(verbose=bool(args.verbose), log_file=log_file)

    path = getattr(args, "path", ".")
    try:
        integration = EditorIntegration.from_path(path)
    except ConfigError as exc:
        parser.exit(1, f"{exc}\n")

    if args.command == "sync":
        try:
            result = integration.sync_all()
        except FileNotFoundError as exc:
            parser.exit(1, f"{exc}\n")
        except (ConfigError, GenerationError) as exc:
            parser.exit(1, f"slnbridge sync failed: {exc}\nRun with --verbose for more details.\n")
        solution = _relativize(result.solution_path) if result.solution_path else "(none)"
        print(f"Generated {len(result.project_paths)} project(s); solution at {solution}")
    elif args.command == "open":
        if args.installation:
            integration.installation = args.installation
        target = args.file
        # Relative targets are taken from the shell directory, not the project root.
        if target and not Path(target).is_absolute():
            target = str(Path.cwd() / target)
        if not integration.open_project(target, args.line, args.column):
            parser.exit(1, "slnbridge open failed.\nRun with --verbose for more details.\n")
    elif args.command == "installations":
        found = integration.installations()
        if not found:
            print(f"No {integration.name} installations found")
        for installation in found:
            print(f"{installation.name}\t{installation.path}")
    elif args.command == "serve":
        from .service import run_service

        service = integration.config.service
        run_service(host=args.host or service.host, port=args.port or service.port)
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _relativize(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
