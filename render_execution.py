#!/usr/bin/env python3
# render_execution.py
# This file is part of Execgraph - Memory-Model Execution Graphs
#
# Command-line interface for rendering candidate executions as Graphviz DOT

import sys
import argparse
from pathlib import Path
from typing import List, Optional

from core.exceptions import ExecutionSelectionError
from core.renderer import GraphRenderer
from utils.execution_reader import (
    ExecutionFormatError,
    read_executions,
    summarize_executions,
    validate_execution_file,
)
from utils.graph_export import export_graph
from utils.logger import configure_logging, get_logger


def parse_relation_list(value: str) -> List[str]:
    """Split a comma-separated relation list, dropping empty entries.

    Args:
        value: String like 'rf,co,fr'

    Returns:
        Relation names in the given order
    """
    return [name.strip() for name in value.split(",") if name.strip()]


def write_output(dot: str, output: Optional[Path]) -> None:
    """Write DOT text to `output`, or to stdout when no path is given."""
    if output is None:
        sys.stdout.write(dot)
        return
    with open(output, "w", encoding="utf-8") as f:
        f.write(dot)
    get_logger().info(f"📝 DOT written to {output}")


def print_execution_list(renderer: GraphRenderer) -> None:
    for index, description in summarize_executions(list(renderer.executions)):
        marker = "*" if index == renderer.current_index else " "
        print(f"{marker} [{index}] {description}")


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser for command line interface.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        description="Render memory-model candidate executions as Graphviz DOT",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python render_execution.py -i executions.json
  python render_execution.py -i executions.json -x 2 -r rf,co,fr
  python render_execution.py -i executions.json --shown -o exec.dot
  python render_execution.py -i executions.json --format svg
  python render_execution.py -i executions.json --list

Input file format:
  JSON list of executions as emitted by the evaluator, each with
  "events", "sets", "relations" and "show" fields.
        """,
    )

    parser.add_argument(
        "-i", "--input", required=True, type=Path, help="Path to JSON execution file"
    )

    parser.add_argument(
        "-x", "--execution", type=int, default=0, help="Index of the execution to render"
    )

    parser.add_argument(
        "-r",
        "--relations",
        type=parse_relation_list,
        default=None,
        help="Comma-separated relations to draw, in drawing order",
    )

    parser.add_argument(
        "--shown",
        action="store_true",
        help="Draw the relations the evaluator marked as shown",
    )

    parser.add_argument(
        "-o", "--output", type=Path, default=None, help="Write DOT to this file instead of stdout"
    )

    parser.add_argument(
        "--format", default=None, help="Also lay out the graph with Graphviz (e.g. svg, png)"
    )

    parser.add_argument(
        "--list", action="store_true", help="List candidate executions and exit"
    )

    parser.add_argument(
        "--validate-only", action="store_true", help="Only validate the execution file"
    )

    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose output"
    )

    parser.add_argument(
        "--debug", action="store_true", help="Enable debug output (overrides --verbose)"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for rendering executions.

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=args.verbose, debug=args.debug)
    logger = get_logger()

    try:
        if args.validate_only:
            validate_execution_file(str(args.input))
            logger.info("✅ Execution file validation successful. Exiting.")
            return 0

        renderer = GraphRenderer(read_executions(str(args.input)))
        renderer.select(args.execution)

        if args.list:
            print_execution_list(renderer)
            return 0

        if args.shown:
            renderer.draw_shown()
        elif args.relations is not None:
            renderer.draw = args.relations

        dot = renderer.render()
        write_output(dot, args.output)

        if args.format:
            base = args.output.stem if args.output else f"{args.input.stem}_{renderer.current_index}"
            export_graph(dot, base, fmt=args.format)

        return 0

    except ExecutionFormatError as e:
        logger.error(f"Execution file error: {e}")
        return 1

    except (ExecutionSelectionError, ValueError) as e:
        logger.error(f"Selection error: {e}")
        return 2

    except OSError as e:
        logger.error(f"Output file error: {e}")
        return 3

    except KeyboardInterrupt:
        logger.error("Rendering interrupted by user")
        return 4

    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        import traceback

        traceback.print_exc()
        return 5


if __name__ == "__main__":
    sys.exit(main())
