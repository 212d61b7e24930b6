"""
Command-line interface for the coupling visualizer v1.0.

This module analyzes a Java source tree from the command line, prints the
package graph as DOT text and writes the circular-layout SVG image. Only the
DOT text is written to stdout; status messages go to stderr.

Usage:
    coupling-visualizer <source_root> <output_dir> <excluded_prefixes> [<title>]
"""

import argparse
import sys
from typing import NoReturn, Optional, Sequence

from colorama import Fore, Style, init
from tabulate import tabulate

from coupling_visualizer import (
    AnalysisResult,
    CodebaseAnalyzer,
    DOTExporter,
    ErrorMode,
    SVGRenderer,
    VisualizerConfig,
    __version__,
)
from coupling_visualizer.exceptions import CouplingError, ExportError
from coupling_visualizer.utils.warnings import WarningCollector

init()
USE_COLOR = True


def _colored(color: str, msg: str) -> str:
    if USE_COLOR:
        return f"{color}{msg}{Style.RESET_ALL}"
    return msg


def print_success(msg: str) -> None:
    """Print success message."""
    print(_colored(Fore.GREEN, f"[OK] {msg}"), file=sys.stderr)


def print_error(msg: str) -> None:
    """Print error message."""
    print(_colored(Fore.RED, f"[ERROR] {msg}"), file=sys.stderr)


def print_warning(msg: str) -> None:
    """Print warning message."""
    print(_colored(Fore.YELLOW, f"[WARN] {msg}"), file=sys.stderr)


def print_info(msg: str) -> None:
    """Print info message."""
    print(_colored(Fore.CYAN, msg), file=sys.stderr)


class UsageArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that exits with status 1 on usage errors."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        print_error(f"{self.prog}: {message}")
        sys.exit(1)


def build_parser() -> argparse.ArgumentParser:
    parser = UsageArgumentParser(
        prog="coupling-visualizer",
        description="Package Coupling Visualizer - v1.0",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Analyze a tree, ignoring JDK packages
  %(prog)s src/main/java out java,javax

  # Include every import and give the image a title
  %(prog)s src/main/java out "" "My Service"

  # Show which package pairs are coupled most
  %(prog)s src/main/java out java --summary
        """,
    )

    # === Input parameters ===
    input_group = parser.add_argument_group("Input Options")
    input_group.add_argument("source_root", help="Root directory of the source tree")
    input_group.add_argument("output_dir", help="Directory the SVG image is written to")
    input_group.add_argument(
        "excluded_packages",
        help="Comma-separated package prefixes to ignore (\"\" for none)",
    )
    input_group.add_argument("title", nargs="?", help="Optional image title")
    input_group.add_argument(
        "--extension",
        default=".java",
        help="Source file extension (default: .java)",
    )

    # === Output parameters ===
    output_group = parser.add_argument_group("Output Options")
    output_group.add_argument(
        "--summary",
        action="store_true",
        help="Print a table of coupled package pairs",
    )
    output_group.add_argument(
        "--verbose", "-v", action="store_true", help="Print every added edge"
    )
    output_group.add_argument(
        "--no-warnings", action="store_true", help="Suppress warnings"
    )
    output_group.add_argument(
        "--no-color", action="store_true", help="Disable colored output"
    )

    # === Configuration parameters ===
    config_group = parser.add_argument_group("Configuration")
    config_group.add_argument(
        "--strict",
        action="store_true",
        help="Abort on the first file that cannot be parsed",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    """
    CLI main entry point.

    Supported commands:
        coupling-visualizer src/main/java out java,javax
        coupling-visualizer src/main/java out "" "Core modules"
        coupling-visualizer src/main/java out java --summary --verbose
    """
    args = build_parser().parse_args(argv)

    if args.no_color:
        global USE_COLOR
        USE_COLOR = False

    try:
        config = VisualizerConfig.from_exclusion_argument(
            args.excluded_packages,
            source_extension=args.extension,
            on_parse_error=ErrorMode.FAIL if args.strict else ErrorMode.WARN,
        )
    except (TypeError, ValueError) as e:
        print_error(f"Invalid configuration: {e}")
        sys.exit(1)

    # 1. Build the graph
    print_info(f"Analyzing sources in: {args.source_root}")
    try:
        result = CodebaseAnalyzer(config).analyze(args.source_root)
    except CouplingError as e:
        print_error(f"Coupling analysis failed: {e}")
        sys.exit(1)

    graph = result.graph
    print_success(
        f"Analysis complete! Found {graph.number_of_vertices()} packages and "
        f"{graph.number_of_edges()} imports in {result.files_analyzed} files."
    )
    if args.verbose:
        show_info(result.warnings)

    # 2. Text render, the only output on stdout
    sys.stdout.write(DOTExporter().export(graph))
    sys.stdout.flush()

    if args.summary:
        handle_summary(result)

    # 3. Image render
    renderer = SVGRenderer(config)
    try:
        output_path = renderer.export(graph, args.output_dir, title=args.title)
    except ExportError as e:
        print_error(str(e))
        sys.exit(1)
    finally:
        if args.verbose:
            show_info(renderer.warnings)
    print_success(f"Exported to {output_path}")

    if not args.no_warnings:
        show_warnings(result.warnings)


def handle_summary(result: AnalysisResult) -> None:
    """Print coupled package pairs, most imports first."""
    pairs = sorted(
        result.graph.edge_multiplicities().items(),
        key=lambda item: (-item[1], item[0]),
    )
    if not pairs:
        print_warning("No package dependencies found")
        return

    print_info("\nPackage coupling:\n")
    rows = [[source, target, count] for (source, target), count in pairs]
    print(tabulate(rows, headers=["Source", "Target", "Imports"]), file=sys.stderr)
    print(file=sys.stderr)


def show_info(warnings: WarningCollector) -> None:
    for warning in warnings.get_by_level("INFO"):
        print_info(str(warning))


def show_warnings(warnings: WarningCollector) -> None:
    """Show warning and error messages."""
    problems = warnings.get_by_level("WARNING") + warnings.get_by_level("ERROR")
    if problems:
        print_warning(f"{len(problems)} warning(s):")
        for i, warning in enumerate(problems, 1):
            print(f"  {i}. {warning}", file=sys.stderr)


if __name__ == "__main__":
    main()
