"""Command line entry point.

    dirpick              interactive selection, then open the location
    dirpick web          open the `web` alias directly
    dirpick --print      print the chosen location instead of opening it
    dirpick --list       show all aliases
"""
import argparse
import logging
import sys

from rich.console import Console

from dirpick import launch
from dirpick.config import ConfigError, load_candidates
from dirpick.selector import DEFAULT_WINDOW, new_state

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_NO_SELECTION = 1
EXIT_CONFIG = 2

DRIVERS = ("terminal", "live")


def _positive_int(value: str) -> int:
    n = int(value)
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {n}")
    return n


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="dirpick", description="Pick a directory alias and open it")
    p.add_argument("alias", nargs="?", help="Open this alias directly, skipping the selector")
    p.add_argument("--config", help="Path to the alias file (default $DIRPICK_CONFIG or ~/.config/dirpick/aliases)")
    p.add_argument("--editor", help="Command used to open the location (default $VISUAL, $EDITOR, vi)")
    p.add_argument("--driver", choices=DRIVERS, default="terminal", help="Terminal backend for the selector")
    p.add_argument("--window", type=_positive_int, default=DEFAULT_WINDOW, help="Number of rows shown in the selector")
    p.add_argument("--print", dest="print_only", action="store_true", help="Print the location instead of opening it")
    p.add_argument("--list", action="store_true", help="List aliases and exit")
    p.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return p


def list_aliases(candidates, console=None):
    console = console or Console(highlight=False)
    name_w = max((len(c.name) for c in candidates), default=0)
    for c in candidates:
        console.print(f"{c.name.ljust(name_w)}  {c.location}", markup=False)


def select(candidates, driver: str = "terminal", window: int = DEFAULT_WINDOW):
    """Run one interactive session and return its final state."""
    state = new_state(candidates, window=window)
    if driver == "live":
        from dirpick import live
        return live.run(state)
    from dirpick import terminal
    return terminal.run(state)


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr,
    )

    try:
        candidates = load_candidates(args.config)
    except (FileNotFoundError, ConfigError) as e:
        logger.error("%s", e)
        return EXIT_CONFIG

    if args.list:
        list_aliases(candidates)
        return EXIT_OK

    if args.alias is not None:
        selection = args.alias
    else:
        final = select(candidates, driver=args.driver, window=args.window)
        if final.cancelled:
            logger.info("Selection cancelled")
            return EXIT_NO_SELECTION
        selection = final.selection

    chosen = launch.resolve(candidates, selection)
    if chosen is None:
        if selection:
            logger.error("No alias named %r", selection)
        else:
            logger.info("Nothing selected")
        return EXIT_NO_SELECTION

    if args.print_only:
        print(chosen.location)
        return EXIT_OK

    try:
        rc = launch.open_location(chosen.location, editor=args.editor)
    except launch.LaunchError as e:
        logger.error("%s", e)
        return EXIT_NO_SELECTION
    return EXIT_OK if rc == 0 else EXIT_NO_SELECTION
