import argparse
import logging

from onejack.common.io_interface import ConsoleIOInterface
from onejack.engine.blackjack import BlackjackEngine
from onejack.events import EventBus
from onejack.ui.terminal import TerminalBlackjackInterface

logger = logging.getLogger("onejack.cli")


def log_event(event):
    event_type, data = event
    logger.debug("%s %s", event_type, data)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="onejack", description="Play blackjack against the dealer."
    )
    parser.add_argument(
        "-s",
        "--seed",
        type=int,
        default=None,
        help="seed for the shuffle, for a repeatable session (default: random)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="log engine activity to stderr",
    )
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if args.verbose:
        EventBus.get_instance().on_any(log_event)

    engine = BlackjackEngine(config={"seed": args.seed})
    TerminalBlackjackInterface(engine, ConsoleIOInterface()).start_game()


if __name__ == "__main__":
    main()
