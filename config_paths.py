import json
import logging
import os

HOME = os.path.expanduser("~")
XDG_CONFIG_HOME = os.environ.get("XDG_CONFIG_HOME")
CONFIG_HOME = XDG_CONFIG_HOME if XDG_CONFIG_HOME else os.path.join(HOME, ".config")
CONFIG_DIR = os.path.join(CONFIG_HOME, "gridvi")
CONFIG_JSON = os.path.join(CONFIG_DIR, "config.json")
LOG_PATH = os.path.join(CONFIG_DIR, "gridvi.log")

# default settings
UNDO_MAX_DEPTH_DEFAULT = None
CLIPBOARD_INTERFACE_COMMAND_DEFAULT = None
SCROLL_MARGIN_DEFAULT = 3
LOG_LEVEL_DEFAULT = "WARNING"


def ensure_config_dirs():
    os.makedirs(CONFIG_DIR, exist_ok=True)


def load_config():
    cfg = {
        "UNDO_MAX_DEPTH": UNDO_MAX_DEPTH_DEFAULT,
        "CLIPBOARD_INTERFACE_COMMAND": CLIPBOARD_INTERFACE_COMMAND_DEFAULT,
        "SCROLL_MARGIN": SCROLL_MARGIN_DEFAULT,
        "LOG_LEVEL": LOG_LEVEL_DEFAULT,
    }

    if not os.path.exists(CONFIG_JSON):
        return cfg

    try:
        with open(CONFIG_JSON, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError):
        return cfg
    if not isinstance(data, dict):
        return cfg

    depth = data.get("undo_max_depth")
    if isinstance(depth, int) and not isinstance(depth, bool) and depth > 0:
        cfg["UNDO_MAX_DEPTH"] = depth

    clip_cmd = data.get("clipboard_interface_command")
    if isinstance(clip_cmd, list) and clip_cmd and all(
        isinstance(item, str) for item in clip_cmd
    ):
        cfg["CLIPBOARD_INTERFACE_COMMAND"] = clip_cmd

    margin = data.get("scroll_margin")
    if isinstance(margin, int) and not isinstance(margin, bool) and margin >= 0:
        cfg["SCROLL_MARGIN"] = margin

    level = data.get("log_level")
    if isinstance(level, str) and isinstance(
        logging.getLevelName(level.upper()), int
    ):
        cfg["LOG_LEVEL"] = level.upper()

    return cfg
