#!/usr/bin/env python3
"""
Main entry point for the options chain viewer.

Loads the chain before curses starts, so a missing or malformed file is
reported on the plain terminal and the process exits with status 1 without
showing any UI.

Run:
    python3 -m chainview [FILENAME] [--layout scroll|tabs] [--config PATH] [--debug] [--log-file PATH]
"""

import argparse
import logging
import sys
from pathlib import Path

from pick import pick

from chainview import __version__, labels
from chainview.app import ChainViewApp
from chainview.chain import ChainLoadError, OptionsChain, load_chain
from chainview.configuration import ViewerConfig
from chainview.constants import DEFAULT_CHAIN_FILE
from chainview.input_dispatcher import KeyBindings
from chainview.logger import DEFAULT_LOG_FILE, LOGGER
from chainview.navigation import NavigatorName, create_navigator

log = LOGGER.setup_logger()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='chainview', description=labels.CLI_DESCRIPTION)
    parser.add_argument('filename', nargs='?', default=DEFAULT_CHAIN_FILE, help=labels.CLI_FILENAME_HELP)
    parser.add_argument('--layout', choices=[name.value for name in NavigatorName], help=labels.CLI_LAYOUT_HELP)
    parser.add_argument('--config', help=labels.CLI_CONFIG_HELP)
    parser.add_argument('--debug', action='store_true', help=labels.CLI_DEBUG_HELP)
    parser.add_argument('--log-file', help=labels.CLI_LOG_FILE_HELP)
    parser.add_argument('--version', action='version', version=f"%(prog)s {__version__}")
    return parser


def resolve_chain_file(path: Path) -> Path:
    """
    Return the chain file to open. A directory lets the user pick one of its JSON files.

    Raises:
        ChainLoadError: The directory holds no JSON files.
    """
    if not path.is_dir():
        return path

    candidates = sorted(path.glob('*.json'))
    if not candidates:
        raise ChainLoadError(labels.ERR_NO_JSON_FILES.format(path))
    if len(candidates) == 1:
        return candidates[0]

    _, index = pick([candidate.name for candidate in candidates], labels.PICK_TITLE.format(path), indicator='=>')
    return candidates[index]


def load(path: Path) -> OptionsChain:
    try:
        return load_chain(resolve_chain_file(path))
    except ChainLoadError as e:
        log.error(str(e))
        print(labels.MSG_ERROR_PREFIX.format(e), file=sys.stderr)
        sys.exit(1)


def main(argv=None) -> None:
    """
    Application entry point.

    1. Parse arguments and read the optional configuration file.
    2. Load the chain (fatal on error).
    3. Start the viewer with the selected layout.
    """
    args = build_parser().parse_args(argv)

    if args.log_file or args.debug:
        LOGGER.enable_file_handler(args.log_file or DEFAULT_LOG_FILE)
    if args.debug:
        LOGGER.set_level(logging.DEBUG)

    config = ViewerConfig(args.config)
    layout = NavigatorName(args.layout) if args.layout else config.layout

    chain = load(Path(args.filename))

    navigator = create_navigator(layout, visible_window=config.visible_window, page_size=config.page_size)
    bindings = KeyBindings.for_navigator(layout, config.extra_keys)
    app = ChainViewApp(chain, navigator, show_greeks=config.show_greeks, bindings=bindings)

    try:
        app.run()
    except KeyboardInterrupt:
        log.info(labels.LOG_VIEWER_STOPPED)


if __name__ == '__main__':
    main()
