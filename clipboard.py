import datetime
import logging
import subprocess


logger = logging.getLogger(__name__)


def today_iso(today: datetime.date | None = None) -> str:
    day = today if today is not None else datetime.date.today()
    return day.strftime("%Y-%m-%d")


class Clipboard:
    """Single-slot copy buffer.

    ``interface_command`` is an optional argv (e.g. ``["wl-copy"]``) that
    also receives every copied value on stdin, so the value is available to
    other programs. The in-process slot is filled regardless of whether the
    mirror succeeds.
    """

    def __init__(self, interface_command: list[str] | None = None):
        self.interface_command = interface_command
        self._value: str | None = None

    @property
    def is_empty(self) -> bool:
        return self._value is None

    def copy(self, value: str) -> bool:
        self._value = str(value)
        if not self.interface_command:
            return True
        try:
            subprocess.run(
                self.interface_command, input=self._value, text=True, check=True
            )
        except (OSError, subprocess.CalledProcessError) as exc:
            logger.warning("clipboard command %s failed: %s", self.interface_command, exc)
            return False
        return True

    def paste(self) -> str | None:
        return self._value
