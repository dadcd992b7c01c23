"""Command-line interface: list, run, hint, verify and watch exercises."""

from __future__ import annotations

import argparse
import os
import queue
import subprocess
import sys
import threading
import time
from collections.abc import Iterable, Iterator, Sequence
from itertools import chain, dropwhile
from pathlib import Path

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

from .exercise import Exercise, load_exercises
from .run import run
from .ui import use_emoji
from .verify import ExerciseFailed, verify

VERSION = "4.4.0"
INFO_FILE = "info.toml"
DEFAULT_OUT_FILE = "default_out.txt"
EXERCISES_DIR = "./exercises"
DEBOUNCE_SECONDS = 2.0

_CLEAR_SCREEN = "\x1bc"
_CLEAR_AND_HOME = "\x1b[2J\x1b[1;1H"

_BANNER = """
       welcome to...

   drillrunner: small exercises, one at a time
"""

_FINISH_ART = r"""
+----------------------------------------------------+
|          You made it to the Fe-nish line!          |
+--------------------------  ------------------------+
                          \/                         
     ▒▒          ▒▒▒▒▒▒▒▒      ▒▒▒▒▒▒▒▒          ▒▒   
   ▒▒▒▒  ▒▒    ▒▒        ▒▒  ▒▒        ▒▒    ▒▒  ▒▒▒▒ 
   ▒▒▒▒  ▒▒  ▒▒            ▒▒            ▒▒  ▒▒  ▒▒▒▒ 
 ░░▒▒▒▒░░▒▒  ▒▒            ▒▒            ▒▒  ▒▒░░▒▒▒▒ 
   ▓▓▓▓▓▓▓▓  ▓▓      ▓▓██  ▓▓  ▓▓██      ▓▓  ▓▓▓▓▓▓▓▓ 
     ▒▒▒▒    ▒▒      ████  ▒▒  ████      ▒▒░░  ▒▒▒▒   
       ▒▒  ▒▒▒▒▒▒        ▒▒▒▒▒▒        ▒▒▒▒▒▒  ▒▒     
         ▒▒▒▒▒▒▒▒▒▒▓▓▓▓▓▓▒▒▒▒▒▒▒▒▓▓▒▒▓▓▒▒▒▒▒▒▒▒       
           ▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒         
             ▒▒▒▒▒▒▒▒▒▒██▒▒▒▒▒▒██▒▒▒▒▒▒▒▒▒▒           
           ▒▒  ▒▒▒▒▒▒▒▒▒▒██████▒▒▒▒▒▒▒▒▒▒  ▒▒         
         ▒▒    ▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒    ▒▒       
       ▒▒    ▒▒    ▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒    ▒▒    ▒▒     
       ▒▒  ▒▒    ▒▒                  ▒▒    ▒▒  ▒▒     
           ▒▒  ▒▒                      ▒▒  ▒▒         

We hope you enjoyed learning about the various aspects of Rust!
If you noticed any issues, please don't hesitate to report them.
You can also contribute your own exercises to help the greater community!

Before reporting an issue or contributing, please read the contributing guidelines."""


class _Parser(argparse.ArgumentParser):
    """Argument parser that exits with status 1 on bad usage."""

    def error(self, message: str) -> None:
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line parser."""
    parser = _Parser(
        prog="drillrunner",
        description="A collection of small exercises to get you used to "
        "writing and reading Rust code",
    )
    parser.add_argument(
        "--nocapture", action="store_true", help="show outputs from the test exercises"
    )
    parser.add_argument(
        "-v", "--version", action="store_true", help="show the executable version"
    )
    commands = parser.add_subparsers(dest="command")
    commands.add_parser(
        "verify", help="Verifies all exercises according to the recommended order"
    )
    commands.add_parser("watch", help="Reruns `verify` when files were edited")
    run_parser = commands.add_parser("run", help="Runs/Tests a single exercise")
    run_parser.add_argument("name", help="the name of the exercise")
    hint_parser = commands.add_parser(
        "hint", help="Returns a hint for the given exercise"
    )
    hint_parser.add_argument("name", help="the name of the exercise")
    list_parser = commands.add_parser("list", help="Lists the exercises available")
    list_parser.add_argument(
        "-p", "--paths", action="store_true", help="show only the paths of the exercises"
    )
    list_parser.add_argument(
        "-n", "--names", action="store_true", help="show only the names of the exercises"
    )
    list_parser.add_argument(
        "-f",
        "--filter",
        default=None,
        help="provide a string to match exercise names; "
        "comma separated patterns are acceptable",
    )
    list_parser.add_argument(
        "-u", "--unsolved", action="store_true", help="display only exercises not yet solved"
    )
    list_parser.add_argument(
        "-s",
        "--solved",
        action="store_true",
        help="display only exercises that have been solved",
    )
    return parser


def rustc_exists() -> bool:
    """Whether `rustc --version` can be run successfully."""
    try:
        result = subprocess.run(["rustc", "--version"], stdout=subprocess.DEVNULL)
    except OSError:
        return False
    return result.returncode == 0


def find_exercise(name: str, exercises: Iterable[Exercise]) -> Exercise:
    """Return the exercise with the given name; raise LookupError if absent."""
    for exercise in exercises:
        if exercise.name == name:
            return exercise
    raise LookupError(f"No exercise found for '{name}'!")


def list_exercises(
    exercises: Sequence[Exercise],
    paths: bool = False,
    names: bool = False,
    filter_text: str | None = None,
    unsolved: bool = False,
    solved: bool = False,
) -> list[str]:
    """Return the lines of the exercise listing, ending with a progress line."""
    lines: list[str] = []
    if not paths and not names:
        lines.append(f"{'Name':<17}\t{'Path':<46}\t{'Status':<7}")
    filters = [f for f in (filter_text or "").lower().split(",") if f.strip()]
    done_count = 0
    for exercise in exercises:
        fname = str(exercise.path)
        done = exercise.looks_done()
        if done:
            done_count += 1
        matches_filter = filter_text is None or any(
            f in exercise.name or f in fname for f in filters
        )
        matches_state = (done and solved) or (not done and unsolved) or (
            not solved and not unsolved
        )
        if not (matches_state and matches_filter):
            continue
        if paths:
            lines.append(fname)
        elif names:
            lines.append(exercise.name)
        else:
            status = "Done" if done else "Pending"
            lines.append(f"{exercise.name:<17}\t{fname:<46}\t{status:<7}")
    total = len(exercises)
    percentage = done_count / total * 100.0 if total else float("nan")
    lines.append(
        f"Progress: You completed {done_count} / {total} exercises ({percentage:.2f} %)."
    )
    return lines


class _SharedHint:
    """The hint of the most recently failed exercise, shared with the shell."""

    def __init__(self, text: str) -> None:
        self._lock = threading.Lock()
        self._text = text

    def set(self, text: str) -> None:
        with self._lock:
            self._text = text

    def get(self) -> str:
        with self._lock:
            return self._text


def _watch_shell(hint: _SharedHint) -> None:
    while True:
        try:
            line = sys.stdin.readline()
        except (OSError, ValueError) as exc:
            print(f"error reading command: {exc}")
            return
        if not line:
            return
        command = line.strip()
        if command == "hint":
            print(hint.get())
        elif command == "clear":
            print(_CLEAR_AND_HOME)
        else:
            print(f"unknown command: {command}")


def _spawn_watch_shell(hint: _SharedHint) -> None:
    print(
        "Type 'hint' or open the corresponding README.md file to get help "
        "or type 'clear' to clear the screen."
    )
    threading.Thread(target=_watch_shell, args=(hint,), daemon=True).start()


class _ChangeHandler(FileSystemEventHandler):
    """Queues the paths of created or modified files."""

    def __init__(self, changes: queue.Queue[Path]) -> None:
        super().__init__()
        self._changes = changes

    def on_created(self, event: FileSystemEvent) -> None:
        self._record(event)

    def on_modified(self, event: FileSystemEvent) -> None:
        self._record(event)

    def _record(self, event: FileSystemEvent) -> None:
        if not event.is_directory:
            self._changes.put(Path(os.fsdecode(event.src_path)))


def _debounced(changes: queue.Queue[Path]) -> Iterator[Path]:
    """Yield changed paths, gathering bursts of events into one per path."""
    while True:
        batch = [changes.get()]
        deadline = time.monotonic() + DEBOUNCE_SECONDS
        while (remaining := deadline - time.monotonic()) > 0:
            try:
                batch.append(changes.get(timeout=remaining))
            except queue.Empty:
                break
        yield from dict.fromkeys(batch)


def _ends_with(path: Path, suffix: Path) -> bool:
    parts = suffix.parts
    return 0 < len(parts) <= len(path.parts) and path.parts[-len(parts):] == parts


def watch(exercises: Sequence[Exercise], verbose: bool = False) -> None:
    """Verify, then re-verify on every edit until all exercises pass."""
    exercises = list(exercises)
    changes: queue.Queue[Path] = queue.Queue()
    observer = Observer()
    observer.schedule(_ChangeHandler(changes), EXERCISES_DIR, recursive=True)
    observer.start()
    try:
        print(_CLEAR_SCREEN)
        try:
            verify(exercises, verbose)
            return
        except ExerciseFailed as exc:
            hint = _SharedHint(exc.exercise.hint)
        _spawn_watch_shell(hint)
        for changed in _debounced(changes):
            if changed.suffix != ".rs" or not changed.exists():
                continue
            filepath = changed.resolve()
            pending = chain(
                dropwhile(lambda e: not _ends_with(filepath, e.path), exercises),
                (
                    e
                    for e in exercises
                    if not e.looks_done() and not _ends_with(filepath, e.path)
                ),
            )
            print(_CLEAR_SCREEN)
            try:
                verify(pending, verbose)
                return
            except ExerciseFailed as exc:
                hint.set(exc.exercise.hint)
    finally:
        observer.stop()
        observer.join()


def _print_list(exercises: Sequence[Exercise], args: argparse.Namespace) -> int:
    lines = list_exercises(
        exercises, args.paths, args.names, args.filter, args.unsolved, args.solved
    )
    try:
        for line in lines:
            print(line)
        sys.stdout.flush()
    except BrokenPipeError:
        return 0
    except OSError:
        return 1
    return 0


def _finish_message(emoji: bool) -> str:
    """The closing text shown once every exercise is complete."""
    mark = "🎉" if emoji else "★"
    return f"{mark} All exercises completed! {mark}\n{_FINISH_ART}"


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point of the command; returns the exit status."""
    args = build_parser().parse_args(argv)

    if args.version:
        print(f"v{VERSION}")
        return 0

    if args.command is None:
        print(_BANNER)

    if not Path(INFO_FILE).exists():
        print(f"{sys.argv[0]} must be run from the exercises directory")
        print(f"Try changing into the directory that holds {INFO_FILE}!")
        return 1

    if not rustc_exists():
        print("We cannot find `rustc`.")
        print("Try running `rustc --version` to diagnose your problem.")
        print("For instructions on how to install Rust, check the README.")
        return 1

    exercises = load_exercises(Path(INFO_FILE).read_text(encoding="utf-8"))
    verbose = args.nocapture

    if args.command is None:
        print(Path(DEFAULT_OUT_FILE).read_text(encoding="utf-8"))
        return 0

    if args.command == "list":
        return _print_list(exercises, args)

    if args.command in ("run", "hint"):
        try:
            exercise = find_exercise(args.name, exercises)
        except LookupError as exc:
            print(exc.args[0])
            return 1
        if args.command == "hint":
            print(exercise.hint)
            return 0
        try:
            run(exercise, verbose)
        except ExerciseFailed:
            return 1
        return 0

    if args.command == "verify":
        try:
            verify(exercises, verbose)
        except ExerciseFailed:
            return 1
        return 0

    try:
        watch(exercises, verbose)
    except OSError as exc:
        print(f"Error: Could not watch your progress. Error message was {exc!r}.")
        print(
            "Most likely you've run out of disk space or your 'inotify limit' "
            "has been reached."
        )
        return 1
    print(_finish_message(use_emoji()))
    return 0