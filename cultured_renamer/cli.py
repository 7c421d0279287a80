"""CLI with subcommands: plan, info."""
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from .core.models import RelocationContext, RelocationResult
from .logging.rich_logger import (
    RichProgressReporter,
    QuietProgressReporter,
    configure_logging,
)


def create_parser() -> argparse.ArgumentParser:
    """Create the main argument parser with subcommands."""
    parser = argparse.ArgumentParser(
        prog="cultured-renamer",
        description="Plan new names and destination folders for anime files.",
    )

    # Global options
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output",
    )
    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Suppress non-essential output",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # ============ PLAN command ============
    plan_parser = subparsers.add_parser(
        "plan",
        help="Plan file names and destinations from relocation context files",
    )
    plan_parser.add_argument(
        "contexts",
        nargs="+",
        type=Path,
        help="JSON files holding one relocation context or a list of them",
    )
    plan_parser.add_argument(
        "-c", "--config",
        type=Path,
        default=None,
        help="Settings file (JSON)",
    )
    plan_parser.add_argument(
        "-w", "-j", "--workers",
        dest="workers",
        type=int,
        default=1,
        help="Number of planning threads (default: 1)",
    )
    plan_parser.add_argument(
        "--json",
        action="store_true",
        help="Print one JSON object per file to stdout instead of a table",
    )

    # ============ INFO command ============
    info_parser = subparsers.add_parser(
        "info",
        help="Show the renamer and its effective configuration",
    )
    info_parser.add_argument(
        "-c", "--config",
        type=Path,
        default=None,
        help="Settings file (JSON)",
    )

    return parser


def result_to_dict(ctx: RelocationContext, result: RelocationResult) -> dict:
    """JSON-friendly view of a relocation result."""
    if not result.is_success:
        return {
            "source": ctx.file.file_name,
            "error": {"kind": result.error.kind.value, "message": result.error.message},
        }
    return {
        "source": ctx.file.file_name,
        "fileName": result.file_name,
        "destinationFolder": {
            "id": result.destination_folder.id,
            "name": result.destination_folder.name,
            "path": str(result.destination_folder.path),
        },
        "subfolder": result.subfolder,
        "targetPath": str(result.target_path),
    }


# ============ Command Handlers ============

def cmd_plan(args: argparse.Namespace, reporter) -> int:
    """Handle the plan command."""
    from .documents import load_contexts
    from .services.batch import plan_batch
    from .services.renamer import CulturedRenamer
    from .settings import load_settings

    settings = load_settings(args.config)
    renamer = CulturedRenamer(settings.to_config())

    contexts: list[RelocationContext] = []
    for path in args.contexts:
        try:
            contexts.extend(load_contexts(path))
        except (OSError, json.JSONDecodeError, ValidationError) as e:
            reporter.error(f"Cannot read {path}: {e}")
            return 1

    reporter.print_header("cultured-renamer plan")
    reporter.print_config({
        "Context Files": ", ".join(str(p) for p in args.contexts),
        "Files": len(contexts),
        "Languages": ", ".join(lang.name.title() for lang in renamer.config.preferred_languages),
        "Workers": args.workers,
    })

    plan = plan_batch(renamer, contexts, workers=args.workers, progress=reporter)

    if args.json:
        for ctx, result in zip(contexts, plan.results):
            print(json.dumps(result_to_dict(ctx, result), ensure_ascii=False))
    else:
        reporter.print_results(contexts, list(plan.results))

    reporter.print_stats(plan.stats)
    if plan.all_planned:
        reporter.success(f"Planned {plan.stats.planned} files")
        return 0
    reporter.warning(f"{plan.stats.failed} of {plan.stats.total} files could not be planned")
    return 1


def cmd_info(args: argparse.Namespace, reporter) -> int:
    """Handle the info command."""
    from .services.renamer import CulturedRenamer
    from .settings import load_settings

    renamer = CulturedRenamer(load_settings(args.config).to_config())
    config = renamer.config

    reporter.print_header(renamer.name)
    reporter.info(renamer.description)
    reporter.print_config({
        "Supports Moving": renamer.supports_moving,
        "Supports Renaming": renamer.supports_renaming,
        "Preferred Languages": ", ".join(lang.name.title() for lang in config.preferred_languages),
        "Anime Folder": config.anime_dir,
        "Movie Folder": config.movie_dir,
        "Restricted Folder": config.restricted_dir,
    })
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    # Create reporter
    if getattr(args, "quiet", False):
        reporter = QuietProgressReporter()
    else:
        reporter = RichProgressReporter(verbose=getattr(args, "verbose", False))

    configure_logging(verbose=getattr(args, "verbose", False))

    # No command specified - show help
    if not args.command:
        parser.print_help()
        return 0

    # Dispatch to command handler
    try:
        with reporter:
            if args.command == "plan":
                return cmd_plan(args, reporter)
            elif args.command == "info":
                return cmd_info(args, reporter)
            else:
                reporter.error(f"Unknown command: {args.command}")
                return 1

    except KeyboardInterrupt:
        # Clean exit on Ctrl+C - no stack trace
        return 130
    except (OSError, ValueError) as e:
        reporter.error(f"Error: {e}")
        if getattr(args, "verbose", False):
            import traceback
            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
