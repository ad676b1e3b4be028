#!/usr/bin/env python3
"""
run_tests.py
------------
Re-runs the Princess Quest suite whenever package code, config or tests change.

Usage:
    python run_tests.py              # Watch and re-run
    python run_tests.py --once       # Single run, exit code mirrors pytest
    python run_tests.py --unit       # Skip the tick-by-tick scenario tests
"""

import argparse
import subprocess
import sys
import time
from pathlib import Path

from watchdog.events import PatternMatchingEventHandler
from watchdog.observers import Observer

ROOT = Path(__file__).resolve().parent
WATCHED = ("princess_quest", "tests")
DEBOUNCE_SECONDS = 1.0


def pytest_command(args):
    cmd = [sys.executable, "-m", "pytest", "-q"]
    if args.unit:
        cmd.extend(["-m", "unit"])
    if args.coverage:
        cmd.extend(["--cov=princess_quest", "--cov-report=term-missing"])
    return cmd


class RerunOnChange(PatternMatchingEventHandler):
    """Runs pytest on .py / .json edits, at most once per debounce window."""

    def __init__(self, command):
        super().__init__(patterns=["*.py", "*.json"], ignore_directories=True)
        self.command = command
        self.last_run = 0.0

    def on_any_event(self, event):
        if event.event_type not in ("modified", "created", "moved"):
            return
        now = time.monotonic()
        if now - self.last_run < DEBOUNCE_SECONDS:
            return
        self.last_run = now
        run(self.command)


def run(command):
    print("\n" + "=" * 60)
    print("Running:", " ".join(command[1:]))
    print("=" * 60)
    return subprocess.run(command, cwd=ROOT).returncode


def main(argv=None):
    parser = argparse.ArgumentParser(description="Princess Quest test watcher")
    parser.add_argument("--once", action="store_true", help="Run once and exit")
    parser.add_argument("--unit", action="store_true", help="Only tests marked 'unit'")
    parser.add_argument("--coverage", action="store_true", help="Report coverage")
    args = parser.parse_args(argv)

    command = pytest_command(args)
    status = run(command)
    if args.once:
        return status

    observer = Observer()
    handler = RerunOnChange(command)
    for name in WATCHED:
        path = ROOT / name
        if path.is_dir():
            observer.schedule(handler, str(path), recursive=True)

    observer.start()
    print(f"Watching {', '.join(WATCHED)} (Ctrl+C to stop)")
    try:
        while True:
            time.sleep(1)
    except KeyboardInterrupt:
        observer.stop()
    observer.join()
    return 0


if __name__ == "__main__":
    sys.exit(main())
