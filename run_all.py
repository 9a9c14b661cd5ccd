"""Run the stats API and the bot side by side; stop both when either exits."""

from __future__ import annotations

import logging
import signal
import subprocess
import sys
import time

from lovematch.logging_utils import configure_logging
from lovematch.settings import settings

logger = logging.getLogger("lovematch_bot")

SERVICES = {
    "api": "run_local.py",
    "bot": "run_telegram_bot.py",
}


def _stop(name: str, proc: subprocess.Popen) -> None:
    if proc.poll() is not None:
        return
    logger.info("Stopping %s", name)
    proc.terminate()
    try:
        proc.wait(timeout=5)
    except subprocess.TimeoutExpired:
        proc.kill()


def _stop_all(procs: dict[str, subprocess.Popen]) -> None:
    for name, proc in procs.items():
        _stop(name, proc)


def main() -> int:
    configure_logging(settings.LOG_LEVEL)
    procs = {name: subprocess.Popen([sys.executable, script]) for name, script in SERVICES.items()}

    try:
        while True:
            for name, proc in procs.items():
                code = proc.poll()
                if code is not None:
                    logger.warning("%s exited with code %s", name, code)
                    _stop_all(procs)
                    return code
            time.sleep(0.5)
    except KeyboardInterrupt:
        _stop_all(procs)
        return 0


if __name__ == "__main__":
    signal.signal(signal.SIGINT, signal.default_int_handler)
    raise SystemExit(main())
