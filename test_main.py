import os
import tempfile
from unittest.mock import patch

import pytest

import main
from file_type_handler import SaveError


load_settings = main._load_settings


DEFAULTS = {
    "UNDO_MAX_DEPTH": None,
    "CLIPBOARD_INTERFACE_COMMAND": None,
    "SCROLL_MARGIN": 3,
    "LOG_LEVEL": "WARNING",
}


@pytest.fixture
def csv_path():
    with tempfile.TemporaryDirectory() as tmp:
        path = os.path.join(tmp, "people.csv")
        with open(path, "w", encoding="utf-8") as f:
            f.write("Name,Age\nAlice,30\n")
        yield path


@pytest.fixture(autouse=True)
def no_settings():
    with patch("main._load_settings", return_value=dict(DEFAULTS)):
        yield


@pytest.mark.parametrize("argv", [[], ["a.csv", "b.csv"]])
def test_wrong_argument_count_is_usage_error(argv, capsys):
    with patch("main.curses.wrapper") as wrapper:
        rc = main.main(argv)

    assert rc == 2
    assert "Usage:" in capsys.readouterr().err
    wrapper.assert_not_called()


def test_version_flag(capsys):
    assert main.main(["-v"]) == 0
    assert capsys.readouterr().out.strip() == main.__version__


def test_help_flag(capsys):
    assert main.main(["-h"]) == 0
    assert "gridvi <path>" in capsys.readouterr().out


def test_load_failure_never_starts_curses(capsys):
    with patch("main.curses.wrapper") as wrapper:
        rc = main.main(["/definitely/not/here.csv"])

    assert rc == 1
    assert "Load failed" in capsys.readouterr().err
    wrapper.assert_not_called()


def test_successful_session_returns_zero(csv_path):
    with patch("main.curses.wrapper") as wrapper:
        rc = main.main([csv_path])

    assert rc == 0
    wrapper.assert_called_once()


def test_save_failure_is_reported(csv_path, capsys):
    with patch("main.curses.wrapper", side_effect=SaveError("disk full")):
        rc = main.main([csv_path])

    assert rc == 1
    assert "Save failed: disk full" in capsys.readouterr().err


def test_unexpected_errors_propagate(csv_path):
    with patch("main.curses.wrapper", side_effect=RuntimeError("boom")):
        with pytest.raises(RuntimeError):
            main.main([csv_path])


def test_config_dir_failure_is_logged():
    with patch(
        "main.config_paths.ensure_config_dirs",
        side_effect=PermissionError(13, "Permission denied"),
    ), patch("main.config_paths.load_config", return_value=dict(DEFAULTS)), patch(
        "main.configure_logging"
    ) as configure, patch.object(main.logger, "warning") as warn:
        config = load_settings()

    assert config == DEFAULTS
    configure.assert_called_once()
    warn.assert_called_once()
    assert "could not create config dir" in warn.call_args.args[0]
