"""Command-line interface for the Angelscript workspace tools."""

import argparse

from ue_angelscript.configure_logging import configure_logging
from ue_angelscript.list_scripts import list_scripts
from ue_angelscript.load_config import load_config
from ue_angelscript.project_info import project_info
from ue_angelscript.read_script import read_script
from ue_angelscript.run_tests import run_tests
from ue_angelscript.script_roots_report import script_roots_report
from ue_angelscript.search_scripts import search_scripts
from ue_angelscript.workspace_config import load_workspace_config


def _positive_float(value: str) -> float:
    try:
        number = float(value)
    except ValueError as e:
        msg = f"not a number: {value}"
        raise argparse.ArgumentTypeError(msg) from e
    if number <= 0:
        msg = f"must be greater than zero: {value}"
        raise argparse.ArgumentTypeError(msg)
    return number


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with one subcommand per operation."""
    ap = argparse.ArgumentParser(
        prog="ue-angelscript",
        description="Inspect, search and test Angelscript files of an Unreal project.",
    )
    ap.add_argument("--config", help="Path to a YAML settings file")
    ap.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging on stderr"
    )
    sub = ap.add_subparsers(dest="command", required=True)

    sp = sub.add_parser("list", help="List script files")
    sp.add_argument(
        "pattern",
        nargs="?",
        help="Substring filter on the relative path (e.g. 'Actor', 'UI/*.as')",
    )
    sp.add_argument("--max-results", type=int, help="Maximum files to show")

    sp = sub.add_parser("read", help="Print a script file with line numbers")
    sp.add_argument("path", help="Path relative to a script root, or absolute")
    sp.add_argument("--start-line", type=int, help="First line (1-based, inclusive)")
    sp.add_argument("--end-line", type=int, help="Last line (1-based, inclusive)")

    sp = sub.add_parser("search", help="Search script files for a regex")
    sp.add_argument("pattern", help="Regular expression to search for")
    sp.add_argument(
        "--context-lines", type=int, help="Lines of context before/after each match"
    )
    sp.add_argument("--max-results", type=int, help="Maximum matches to show")

    sp = sub.add_parser("run-tests", help="Run the unit test commandlet")
    sp.add_argument("--filter", dest="test_filter", help="Test name filter")
    sp.add_argument(
        "--timeout", type=_positive_float, help="Timeout in seconds (default 120)"
    )

    sub.add_parser("roots", help="Show the script root directories")
    sub.add_parser("info", help="Show a project overview")
    return ap


def main(argv: list[str] | None = None) -> int:
    """Run one workspace operation and print its report."""
    args = build_parser().parse_args(argv)
    configure_logging(verbose=args.verbose)

    settings = load_config(args.config)
    workspace = load_workspace_config()

    if args.command == "list":
        print(list_scripts(settings, workspace, args.pattern, args.max_results))
    elif args.command == "read":
        print(
            read_script(settings, workspace, args.path, args.start_line, args.end_line)
        )
    elif args.command == "search":
        print(
            search_scripts(
                settings, workspace, args.pattern, args.context_lines, args.max_results
            )
        )
    elif args.command == "run-tests":
        text, result = run_tests(settings, workspace, args.test_filter, args.timeout)
        print(text)
        return 0 if result is not None and result.passed else 1
    elif args.command == "roots":
        print(script_roots_report(settings, workspace))
    elif args.command == "info":
        print(project_info(settings, workspace))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
