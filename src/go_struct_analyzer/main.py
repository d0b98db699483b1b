"""Main entry point for the Go struct analyzer."""

import argparse
import json
import sys
import traceback
from pathlib import Path
from typing import NoReturn

from .application import (
    StructAnalysis,
    StructAnalyzer,
    analysis_to_dict,
    find_field_at,
    find_struct_at,
    find_struct_by_name,
    format_analysis,
    format_field_tooltip,
)
from .domain.models.go import ARCHITECTURE_WORD_SIZES
from .infrastructure.config import Config
from .infrastructure.logging import LoggerSetup, ProgressTracker, get_logger, log_timing


def parse_position(value: str) -> tuple[int, int]:
    """Parse a 1-based ``LINE:COL`` argument into a zero-based position."""
    try:
        line_str, column_str = value.split(":", 1)
        line, column = int(line_str), int(column_str)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected LINE:COL, got {value!r}") from None
    if line < 1 or column < 1:
        raise argparse.ArgumentTypeError(f"LINE and COL start at 1, got {value!r}")
    return line - 1, column - 1


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Report the memory layout of Go structs: field sizes, offsets, "
        "padding, and whether reordering fields would make them smaller",
        epilog="""
Examples:
  # Analyze all structs in a file (amd64 by default)
  go-struct-analyzer model.go

  # 32-bit target
  go-struct-analyzer model.go --arch 386

  # Only structs that waste space, as JSON
  go-struct-analyzer *.go --only-optimizable --json

  # The struct under a cursor position (1-based line:column)
  go-struct-analyzer model.go --at 12:5

  # Fail in CI when a struct could be reordered smaller
  go-struct-analyzer pkg/*.go --fail-on-optimizable
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "files",
        type=Path,
        nargs="+",
        help="Go source files to analyze",
    )
    parser.add_argument(
        "--arch",
        choices=sorted(ARCHITECTURE_WORD_SIZES),
        help="Target GOARCH (default: amd64, or GOSA_ARCHITECTURE)",
    )
    parser.add_argument(
        "--word-size",
        type=int,
        choices=[4, 8],
        help="Pointer width in bytes; overrides the one implied by --arch",
    )
    parser.add_argument(
        "--struct",
        dest="struct_name",
        metavar="NAME",
        help="Only report the struct with this name",
    )
    parser.add_argument(
        "--at",
        type=parse_position,
        metavar="LINE:COL",
        help="Only report the struct containing this position",
    )
    parser.add_argument(
        "--only-optimizable",
        action="store_true",
        help="Only report structs that would shrink if their fields were reordered",
    )
    parser.add_argument(
        "--fail-on-optimizable",
        action="store_true",
        help="Exit with status 2 if any reported struct could be reordered smaller",
    )
    parser.add_argument(
        "--expand-multi-name",
        action="store_true",
        default=None,
        help="Count every name in 'a, b T' fields instead of only the first",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Write the report as JSON",
    )
    parser.add_argument(
        "--log-dir",
        type=Path,
        help="Also write a debug log file to this directory",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=None,
        help="Enable verbose output with debug logs",
    )
    return parser.parse_args(argv)


def select_analyses(
    analyses: list[StructAnalysis], args: argparse.Namespace, analyzer: StructAnalyzer
) -> list[StructAnalysis]:
    """Apply the --struct, --at and --only-optimizable filters."""
    if args.struct_name:
        found = find_struct_by_name(analyses, args.struct_name)
        analyses = [found] if found is not None else []
    if args.at is not None:
        found = find_struct_at(analyses, *args.at)
        analyses = [found] if found is not None else []
    if args.only_optimizable:
        analyses = analyzer.optimizable(analyses)
    return analyses


def render_text(
    results: list[tuple[Path, list[StructAnalysis]]],
    config: Config,
    position: tuple[int, int] | None,
) -> str:
    """Plain-text report for all analyzed files."""
    blocks: list[str] = []
    for path, analyses in results:
        blocks.append(f"== {path} ({config.architecture}, {config.word_size}-byte words) ==")
        for analysis in analyses:
            blocks.append(
                format_analysis(
                    analysis,
                    show_annotations=config.show_inline_annotations,
                    show_warnings=config.enable_optimization_warnings,
                )
            )
            if position is None:
                continue
            field = find_field_at(analysis, *position)
            field_layout = analysis.field_layout_for(field) if field is not None else None
            if field_layout is not None:
                tooltip = format_field_tooltip(field_layout)
                blocks.append(f"{field.name} {field.type_expression}\n{tooltip}")
    return "\n\n".join(blocks)


def render_json(results: list[tuple[Path, list[StructAnalysis]]], config: Config) -> str:
    """JSON report for all analyzed files."""
    payload = {
        "architecture": config.architecture,
        "word_size": config.word_size,
        "files": [
            {"path": str(path), "structs": [analysis_to_dict(a) for a in analyses]}
            for path, analyses in results
        ],
    }
    return json.dumps(payload, indent=2, ensure_ascii=False)


@log_timing
def main(argv: list[str] | None = None) -> NoReturn:
    """Main entry point for Go struct layout analysis."""
    args = parse_args(argv)

    # Load configuration
    try:
        config = Config.from_args(
            architecture=args.arch,
            word_size=args.word_size,
            verbose=args.verbose,
            log_dir=args.log_dir,
            expand_multi_name_fields=args.expand_multi_name,
        )
        config.validate()
    except ValueError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(1)

    # Initialize logging
    LoggerSetup.initialize(config.log_dir, verbose=config.verbose)
    logger = get_logger(__name__)

    logger.debug(f"Architecture: {config.architecture} (word size {config.word_size})")
    logger.debug(f"Multi-name field expansion: {config.expand_multi_name_fields}")

    tracker = ProgressTracker(logger)
    analyzer = StructAnalyzer(config, tracker)

    results: list[tuple[Path, list[StructAnalysis]]] = []
    failed_files: list[tuple[Path, str]] = []

    try:
        with tracker.track_operation("analyze files"):
            for i, path in enumerate(args.files, 1):
                logger.debug(f"[{i}/{len(args.files)}] Analyzing: {path}")
                try:
                    analyses = analyzer.analyze_file(path)
                except (OSError, UnicodeDecodeError) as e:
                    logger.error(f"[FAILED] {path}: {e}")
                    failed_files.append((path, str(e)))
                    continue

                selected = select_analyses(analyses, args, analyzer)
                if args.at is not None and not selected:
                    logger.info(f"No struct found at {args.at[0] + 1}:{args.at[1] + 1} in {path}")
                results.append((path, selected))

    except Exception as e:
        logger.error(f"Fatal error during analysis: {e}")
        if config.verbose:
            traceback.print_exc()
        sys.exit(1)

    if args.json:
        print(render_json(results, config))
    elif results:
        print(render_text(results, config, args.at))

    if config.verbose:
        tracker.log_memory_usage()
    tracker.report_summary()

    if failed_files:
        logger.info("Failed files:")
        for path, error in failed_files:
            logger.info(f"  - {path}: {error}")
        sys.exit(1)

    if args.fail_on_optimizable:
        reported = [analysis for _, analyses in results for analysis in analyses]
        if analyzer.optimizable(reported):
            sys.exit(2)

    sys.exit(0)


if __name__ == "__main__":
    main()
