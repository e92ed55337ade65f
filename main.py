import sys
import os
import curses
import logging

# Make ESC snappy
os.environ.setdefault("ESCDELAY", "25")

import config_paths
from app_state import AppState
from file_type_handler import FileTypeHandler, LoadError, SaveError
from log_setup import configure_logging
from orchestrator import Orchestrator

try:
    from _version import __version__
except ImportError:
    __version__ = "0.0.0"


logger = logging.getLogger("gridvi")

USAGE = (
    "gridvi - terminal grid editor for delimited text files\n\n"
    "Usage:\n  gridvi <path>\n  gridvi -v\n  gridvi -h\n"
)


def _load_settings():
    dir_error = None
    try:
        config_paths.ensure_config_dirs()
    except OSError as exc:
        dir_error = exc
    config = config_paths.load_config()
    configure_logging(config_paths.LOG_PATH, config["LOG_LEVEL"])
    if dir_error is not None:
        logger.warning(
            "could not create config dir %s: %s", config_paths.CONFIG_DIR, dir_error
        )
    return config


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)

    if "-v" in args or "-V" in args:
        print(__version__)
        return 0

    if "-h" in args:
        print(USAGE)
        return 0

    if len(args) != 1:
        print(USAGE, file=sys.stderr)
        return 2

    path = args[0]
    config = _load_settings()

    handler = FileTypeHandler(path)
    try:
        document = handler.load()
    except LoadError as exc:
        logger.error("load failed: %s", exc)
        print(f"Load failed: {exc}", file=sys.stderr)
        return 1

    state = AppState.from_config(document, path, handler, config)

    def curses_main(stdscr):
        Orchestrator(stdscr, state, config).run()

    # curses.wrapper restores the terminal on every exit path
    try:
        curses.wrapper(curses_main)
    except SaveError as exc:
        logger.error("save failed: %s", exc)
        print(f"Save failed: {exc}", file=sys.stderr)
        return 1
    except Exception:
        logger.exception("fatal error")
        raise

    return 0


if __name__ == "__main__":
    sys.exit(main())
