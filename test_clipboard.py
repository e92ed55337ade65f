import datetime
import subprocess
from unittest.mock import patch

from clipboard import Clipboard, today_iso


def test_starts_empty():
    clip = Clipboard()

    assert clip.is_empty
    assert clip.paste() is None


def test_copy_overwrites_and_paste_is_repeatable():
    clip = Clipboard()

    clip.copy("first")
    clip.copy("second")

    assert clip.paste() == "second"
    assert clip.paste() == "second"
    assert not clip.is_empty


def test_copy_without_command_does_not_spawn():
    with patch("subprocess.run") as run:
        assert Clipboard().copy("x") is True
        run.assert_not_called()


def test_copy_mirrors_to_interface_command():
    clip = Clipboard(interface_command=["fake-clip"])

    with patch("subprocess.run") as run:
        assert clip.copy("Alice") is True

    assert run.call_count == 1
    call = run.call_args
    assert call.args[0] == ["fake-clip"]
    assert call.kwargs.get("input") == "Alice"
    assert call.kwargs.get("text") is True


def test_failed_mirror_keeps_slot():
    clip = Clipboard(interface_command=["missing-clip"])

    with patch("subprocess.run", side_effect=FileNotFoundError("missing-clip")):
        assert clip.copy("Alice") is False

    assert clip.paste() == "Alice"


def test_nonzero_mirror_exit_is_reported():
    clip = Clipboard(interface_command=["false"])
    err = subprocess.CalledProcessError(1, ["false"])

    with patch("subprocess.run", side_effect=err):
        assert clip.copy("x") is False


def test_today_iso_formats_calendar_date():
    assert today_iso(datetime.date(2024, 3, 7)) == "2024-03-07"


def test_today_iso_defaults_to_today():
    assert today_iso() == datetime.date.today().isoformat()
