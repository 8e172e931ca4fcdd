#!/usr/bin/env python3
"""
Bucket Search Command Line

Runs one path search between two bucket states and prints the result.

Example:
    bucketsearch --capacities 4 3 --start 0 0 --target 2 0 --method ALL
"""

import argparse
import logging
import sys

from rich.console import Console
from rich.panel import Panel

from bucketsearch.config.config import config
from bucketsearch.core.exceptions import InvalidStateError
from bucketsearch.core.logging import BucketSearchLogger
from bucketsearch.display import format_path, render_path
from bucketsearch.path_finder import BucketPathFinder

logger = BucketSearchLogger.get_logger('cli')


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Bucket Search: find a path between two bucket states")
    parser.add_argument("--capacities", type=int, nargs=2, metavar=("A", "B"),
                        default=list(config.search['default_capacities']),
                        help="Capacities of buckets A and B")
    parser.add_argument("--start", type=int, nargs=2, metavar=("A", "B"), default=[0, 0],
                        help="Start quantities of buckets A and B")
    parser.add_argument("--target", type=int, nargs=2, metavar=("A", "B"), required=True,
                        help="Target quantities of buckets A and B")
    parser.add_argument("--method", choices=config.search['algorithms'] + ['ALL'],
                        default=config.search['default_method'],
                        help="Search method, or ALL to compare every method")
    parser.add_argument("--plain", action="store_true",
                        help="Print plain text instead of tables")
    parser.add_argument("--log-level", default=None,
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help="Logging level")
    return parser.parse_args(argv)


def main(argv=None, console=None):
    """
    Run the command line interface.

    Returns:
        int: 0 when every search reached the target, 1 when one did not,
             2 when the given states are invalid
    """
    args = parse_args(argv)
    if console is None:
        console = Console()
    if args.log_level:
        BucketSearchLogger.set_level(getattr(logging, args.log_level))

    try:
        finder = BucketPathFinder(args.capacities)
        start = finder.build_node(args.start)
        target = finder.build_node(args.target)
    except InvalidStateError as e:
        logger.error(f"Invalid bucket state: {e}")
        console.print(f"[bold red]Invalid bucket state: {e}[/bold red]")
        return 2

    methods = config.search['algorithms'] if args.method == 'ALL' else [args.method]
    results = finder.compare_methods(start, target, methods)

    for method, path in results.items():
        output = finder.format_path_output(path, method)
        if args.plain:
            console.print(f"{output['method_name']}:")
            console.print(format_path(path))
        else:
            console.print(Panel(f"{output['method_name']}: {start} -> {target}", border_style="cyan"))
            render_path(path, console, title=output['method_name'],
                        nodes_expanded=output['nodes_expanded'])

    return 0 if all(path is not None for path in results.values()) else 1


if __name__ == "__main__":
    sys.exit(main())
