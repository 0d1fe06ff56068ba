#!/usr/bin/env python
"""
Interactive gerrymandering checker – load tallies, search a state, print stats or plot.
"""
import sys
from typing import List, Optional, TextIO

# --------------------------------------------------------------------- #
# Project imports
# --------------------------------------------------------------------- #
from gerrymander.config import OUTPUT_CSV
from gerrymander.errors import GerrymanderError
from gerrymander.logger import get_logger
from gerrymander.session import Session
from gerrymander.utils import join_search_terms, split_line

log = get_logger()

DIVIDER = "-----------------------------"


def display_menu(session: Session, out: TextIO) -> None:
    chosen = session.chosen.name if session.chosen else "N/A"
    print(file=out)
    print(f"Data loaded? {'Yes' if session.data_loaded else 'No'}", file=out)
    print(f"State: {chosen}", file=out)
    print(file=out)
    print("Enter command: ", end="", file=out)


# --------------------------------------------------------------------- #
# Command handlers
# --------------------------------------------------------------------- #
def cmd_load(session: Session, args: List[str], out: TextIO) -> None:
    if session.data_loaded:
        print("Already read data in, exit and start over.", file=out)
        return
    if len(args) < 2:
        print("Usage: load <districts file> <eligible voters file>", file=out)
        return

    result = session.load_sources(args[0], args[1])
    if result.failed_source == "primary":
        print("Invalid first file, try again.", file=out)
    elif result.failed_source == "secondary":
        print("Invalid second file, try again.", file=out)
    elif result.skipped:
        print(f"Skipped {len(result.skipped)} malformed line(s).", file=out)


def cmd_search(session: Session, args: List[str], out: TextIO) -> None:
    if session.find_region(join_search_terms(args)) is None:
        print("State does not exist, search again.", file=out)


def cmd_stats(session: Session, args: List[str], out: TextIO) -> None:
    for line in session.get_stats().summary_lines():
        print(line, file=out)


def cmd_plot(session: Session, args: List[str], out: TextIO) -> None:
    for number, bar in session.get_district_plot():
        print(f"District: {number}", file=out)
        print(bar, file=out)


def cmd_export(session: Session, args: List[str], out: TextIO) -> None:
    target = args[0] if args else OUTPUT_CSV
    try:
        path = session.export_summary(target)
    except OSError as e:
        log.warning(f"Export to {target} failed: {e}")
        print(f"Could not write summary to {target}.", file=out)
        return
    print(f"Summary written to {path}", file=out)


COMMANDS = {
    "load": cmd_load,
    "search": cmd_search,
    "stats": cmd_stats,
    "plot": cmd_plot,
    "export": cmd_export,
}


# --------------------------------------------------------------------- #
# CLI entry point
# --------------------------------------------------------------------- #
def run(inp: TextIO = sys.stdin, out: TextIO = sys.stdout, session: Optional[Session] = None) -> Session:
    session = session or Session()
    print("Welcome to the Gerrymandering App!", file=out)

    while True:
        display_menu(session, out)
        raw = inp.readline()
        if not raw:
            break
        words = split_line(raw.rstrip("\r\n"), " ")
        command, args = words[0], words[1:]

        print(file=out)
        print(DIVIDER, file=out)
        print(file=out)

        if command == "exit":
            break
        if command != "load" and not session.data_loaded:
            print("No data loaded, please load data first.", file=out)
            continue

        handler = COMMANDS.get(command)
        if handler is None:
            print(f"Unknown command: {command}", file=out)
            continue

        try:
            handler(session, args, out)
        except GerrymanderError as e:
            log.debug(f"{command} failed: {e}")
            print(e, file=out)

    return session


def main() -> None:
    run()


if __name__ == "__main__":
    main()
