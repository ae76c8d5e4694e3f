"""CLI entrypoints for litdocs commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .logging import configure_logging, log_files
from .orchestrator import Orchestrator


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


def _add_path_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Docs root holding .litdocs.yml (defaults to current directory).",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="litdocs",
        description="Build a documentation site from literate tutorials and markdown pages.",
    )
    _add_verbose_option(parser)
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write litdocs and MkDocs log records to this file.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    build_parser = subparsers.add_parser(
        "build",
        help="Regenerate tutorials, assemble the page tree and build the site.",
    )
    _add_verbose_option(build_parser, suppress_default=True)
    _add_path_argument(build_parser)
    build_parser.add_argument(
        "--fast",
        action="store_true",
        help=(
            "Skip rebuilding the tutorials and running doctests. Only use this to "
            "iterate on markdown; never in production."
        ),
    )

    deploy_parser = subparsers.add_parser(
        "deploy",
        help="Run a full build and publish the site with mkdocs gh-deploy.",
    )
    _add_verbose_option(deploy_parser, suppress_default=True)
    _add_path_argument(deploy_parser)

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for litdocs commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    logger = configure_logging(verbose=bool(args.verbose), log_file=args.log_file)

    orchestrator = Orchestrator()

    if args.command == "build":
        try:
            outcome = orchestrator.run_build(args.path, fast=bool(getattr(args, "fast", False)))
        except FileNotFoundError as exc:
            parser.exit(1, f"{exc}\n")
        except RuntimeError as exc:
            logger.debug("Build failed", exc_info=True)
            parser.exit(1, f"litdocs build failed: {exc}\n{_failure_hint()}")
        print(f"Site built at {_relativize(outcome.site_dir)}")
    elif args.command == "deploy":
        try:
            outcome = orchestrator.run_deploy(args.path)
        except FileNotFoundError as exc:
            parser.exit(1, f"{exc}\n")
        except RuntimeError as exc:
            logger.debug("Deploy failed", exc_info=True)
            parser.exit(1, f"litdocs deploy failed: {exc}\n{_failure_hint()}")
        print(f"Site deployed from {_relativize(outcome.site_dir)}")
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _failure_hint() -> str:
    files = log_files()
    if files:
        return f"Full log written to {_relativize(files[0])}.\n"
    return "Run with --verbose for more details.\n"


def _relativize(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
