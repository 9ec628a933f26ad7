"""
Run with: python -m rootwords
"""
from __future__ import annotations

import argparse
import logging
import sys

import pyqtgraph as pg

from rootwords import config
from rootwords.app.application import create_app
from rootwords.app.state import Store
from rootwords.app.ui.main_window import MainWindow
from rootwords.controller.session import AttachPolicy, AvailabilityPolicy
from rootwords.logging_config import setup_logging
from rootwords.model.ring import parse_letters

pg.setConfigOption("background", "w")
pg.setConfigOption("foreground", "k")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="rootwords", description="Grow a tree of words from a ring of letters.")
    parser.add_argument("--letters", default=config.DEFAULT_LETTERS,
                        help="root letters, comma separated or as one string")
    parser.add_argument("--dictionary", default=config.DEFAULT_DICTIONARY_PATH,
                        help="newline-delimited word list")
    parser.add_argument("--attach", choices=[p.value for p in AttachPolicy], default=AttachPolicy.BRANCH.value)
    parser.add_argument("--availability", choices=[p.value for p in AvailabilityPolicy],
                        default=AvailabilityPolicy.MARK_CHILD_SLOTS_USED.value)
    parser.add_argument("--debug", action="store_true", help="verbose logging")
    parser.add_argument("--log-file", default=None)
    args = parser.parse_args(argv)
    if not parse_letters(args.letters):
        parser.error("--letters needs at least one letter")
    return args


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the application."""
    args = parse_args(argv)
    setup_logging(level=logging.DEBUG if args.debug else logging.INFO, log_file=args.log_file)

    app = create_app()
    store = Store(
        letters=args.letters,
        attach_policy=AttachPolicy(args.attach),
        availability_policy=AvailabilityPolicy(args.availability),
    )
    win = MainWindow(store)
    win.show()
    store.load_dictionary(args.dictionary)
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
