"""Command-line front door for dualpane.

Three subcommands drive the engine directly: ``ls`` lists one pane, ``search``
walks a subtree, and ``diff`` compares two files. Engine errors end the
process with a one-line message.
"""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import datetime
from pathlib import Path

from . import config
from .diff import compare, format_diff, highlight_diff, summary_line
from .errors import DualPaneError
from .listing import format_date, format_size
from .pane import PaneState, SortDirection, SortKey
from .search import SearchCriteria, TypeFilter, search


def setup_logging(level: int = logging.WARNING) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler()],
    )


def _non_negative_int(value: str) -> int:
    """argparse type for byte counts."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed < 0:
        raise argparse.ArgumentTypeError("value must be >= 0")
    return parsed


def _iso_datetime(value: str) -> datetime:
    try:
        return datetime.fromisoformat(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid ISO date: {value!r}") from exc


def render_listing(pane: PaneState) -> str:
    """Render the pane's visible rows as ``marker name size date`` columns."""
    rows: list[tuple[str, str, str, str]] = []
    for index, entry in pane.visible_entries():
        marker = ">" if index == pane.cursor else " "
        if entry.is_parent_link:
            rows.append((marker, entry.display_name, "", ""))
            continue
        name = entry.display_name + ("/" if entry.is_directory else "")
        size = "<DIR>" if entry.is_directory else format_size(entry.size_bytes)
        rows.append((marker, name, size, format_date(entry.mtime_ns)))

    name_width = max((len(row[1]) for row in rows), default=0)
    size_width = max((len(row[2]) for row in rows), default=0)
    lines = [f"{marker} {name:<{name_width}}  {size:>{size_width}}  {date}".rstrip() for marker, name, size, date in rows]
    return "".join(line + "\n" for line in lines)


def _run_ls(args: argparse.Namespace) -> None:
    sort_key, sort_direction = config.load_sort_preference()
    if args.sort is not None:
        sort_key = SortKey(args.sort)
        sort_direction = SortDirection.ASCENDING
    if args.reverse:
        sort_direction = sort_direction.flipped()
    pane = PaneState(
        args.path,
        sort_key=sort_key,
        sort_direction=sort_direction,
        show_hidden=args.all or config.load_show_hidden(),
    )
    pane.apply_filter(args.filter)
    sys.stdout.write(f"{pane.current_path}\n")
    sys.stdout.write(render_listing(pane))


def _run_search(args: argparse.Namespace) -> None:
    criteria = SearchCriteria(
        root=Path(args.root),
        filename_substring=args.name,
        content_substring=args.content,
        min_size=args.min_size,
        max_size=args.max_size,
        modified_after=args.after,
        modified_before=args.before,
        type_filter=TypeFilter(args.type),
        case_sensitive=args.case_sensitive,
        include_hidden=args.hidden,
    )
    for entry in search(criteria):
        suffix = "/" if entry.is_directory else ""
        sys.stdout.write(f"{entry.absolute_path}{suffix}\n")


def _run_diff(args: argparse.Namespace) -> None:
    result = compare(args.left, args.right)
    sys.stdout.write(summary_line(result) + "\n")
    if result.identical:
        return
    report = format_diff(result)
    use_color = not args.no_color and sys.stdout.isatty()
    if use_color:
        report = highlight_diff(report, args.style or config.load_diff_style())
    sys.stdout.write(report)
    raise SystemExit(1)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="dualpane", description="Browse, search, and compare files.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    ls_parser = subparsers.add_parser("ls", help="List a directory the way a pane shows it.")
    ls_parser.add_argument("path", nargs="?", default=None, help="Directory to list (default: home).")
    ls_parser.add_argument("--sort", choices=[key.value for key in SortKey], default=None)
    ls_parser.add_argument("--reverse", action="store_true", help="Reverse the sort direction.")
    ls_parser.add_argument("--filter", default="", help="Case-insensitive name substring.")
    ls_parser.add_argument("-a", "--all", action="store_true", help="Show hidden entries.")
    ls_parser.set_defaults(handler=_run_ls)

    search_parser = subparsers.add_parser("search", help="Search a directory tree.")
    search_parser.add_argument("root", help="Directory to search below.")
    search_parser.add_argument("--name", default="", help="Filename substring.")
    search_parser.add_argument("--content", default="", help="File content substring.")
    search_parser.add_argument("--min-size", type=_non_negative_int, default=None)
    search_parser.add_argument("--max-size", type=_non_negative_int, default=None)
    search_parser.add_argument("--after", type=_iso_datetime, default=None, help="Modified at or after (ISO date).")
    search_parser.add_argument("--before", type=_iso_datetime, default=None, help="Modified at or before (ISO date).")
    search_parser.add_argument("--type", choices=[item.value for item in TypeFilter], default=TypeFilter.ALL.value)
    search_parser.add_argument("--case-sensitive", action="store_true")
    search_parser.add_argument("--hidden", action="store_true", help="Include dot-files and dot-directories.")
    search_parser.set_defaults(handler=_run_search)

    diff_parser = subparsers.add_parser("diff", help="Compare two files line by line.")
    diff_parser.add_argument("left")
    diff_parser.add_argument("right")
    diff_parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    diff_parser.add_argument("--style", default=None, help="Pygments style name.")
    diff_parser.set_defaults(handler=_run_diff)
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse arguments and run one subcommand.

    ``diff`` exits with status 1 when the files differ.
    """
    args = build_parser().parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)
    try:
        args.handler(args)
    except DualPaneError as exc:
        raise SystemExit(f"dualpane: {exc}") from exc


if __name__ == "__main__":
    main()
