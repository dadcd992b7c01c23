"""Exercises: how they are described, compiled, run and checked for completion."""

from __future__ import annotations

import enum
import os
import re
import subprocess
import threading
import tomllib
from dataclasses import dataclass
from pathlib import Path

from .ui import use_emoji

RUSTC_COLOR_ARGS = ("--color", "always")
I_AM_DONE_REGEX = re.compile(r"^\s*///?\s*I\s+AM\s+NOT\s+DONE", re.MULTILINE)
CONTEXT = 2
CLIPPY_CARGO_TOML_PATH = "./exercises/clippy/Cargo.toml"


def temp_file() -> str:
    """Return a temporary binary name unique to this process and thread."""
    return f"./temp_{os.getpid()}_{threading.get_ident()}"


def clean() -> None:
    """Remove the temporary binary, ignoring a missing file."""
    try:
        os.remove(temp_file())
    except OSError:
        pass


class Mode(enum.Enum):
    """How an exercise is checked."""

    COMPILE = "compile"
    TEST = "test"
    CLIPPY = "clippy"


@dataclass(frozen=True)
class ContextLine:
    """One source line shown around a pending marker."""

    line: str
    number: int
    important: bool


@dataclass(frozen=True)
class State:
    """Completion state: done when there is no pending context."""

    context: tuple[ContextLine, ...] = ()

    @property
    def done(self) -> bool:
        return not self.context


@dataclass(frozen=True)
class ExerciseOutput:
    """Captured output of a finished command."""

    stdout: str
    stderr: str


class CompileError(Exception):
    """Compiling an exercise failed."""

    def __init__(self, output: ExerciseOutput) -> None:
        super().__init__("compilation failed")
        self.output = output


class ExerciseRunError(Exception):
    """Running a compiled exercise exited unsuccessfully."""

    def __init__(self, output: ExerciseOutput) -> None:
        super().__init__("exercise exited with an error")
        self.output = output


def _output_of(result: subprocess.CompletedProcess) -> ExerciseOutput:
    return ExerciseOutput(
        stdout=result.stdout.decode("utf-8", errors="replace"),
        stderr=result.stderr.decode("utf-8", errors="replace"),
    )


def _execute(args: list[str], failure: str) -> subprocess.CompletedProcess:
    try:
        return subprocess.run(args, capture_output=True)
    except OSError as exc:
        raise RuntimeError(failure) from exc


def _split_lines(source: str) -> list[str]:
    lines = source.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


class CompiledExercise:
    """A successfully compiled exercise; closing it removes the binary."""

    def __init__(self, exercise: Exercise) -> None:
        self.exercise = exercise
        self._closed = False

    def run(self) -> ExerciseOutput:
        """Run the binary; raise ExerciseRunError if it fails."""
        return self.exercise._run()

    def close(self) -> None:
        if not self._closed:
            clean()
            self._closed = True

    def __enter__(self) -> CompiledExercise:
        return self

    def __exit__(self, *args) -> None:
        self.close()


@dataclass
class Exercise:
    """An exercise as listed in info.toml."""

    name: str
    path: Path
    mode: Mode
    hint: str = ""

    def __post_init__(self) -> None:
        self.path = Path(self.path)
        self.mode = Mode(self.mode)

    def compile(self) -> CompiledExercise:
        """Compile the exercise; raise CompileError with the output on failure."""
        path = str(self.path)
        if self.mode is Mode.CLIPPY:
            result = self._compile_clippy(path)
        else:
            test_flag = ["--test"] if self.mode is Mode.TEST else []
            result = _execute(
                ["rustc", *test_flag, path, "-o", temp_file(), *RUSTC_COLOR_ARGS],
                "Failed to run 'compile' command.",
            )
        if result.returncode == 0:
            return CompiledExercise(self)
        clean()
        raise CompileError(_output_of(result))

    def _compile_clippy(self, path: str) -> subprocess.CompletedProcess:
        name = self.name
        cargo_toml = (
            f'[package]\nname = "{name}"\nversion = "0.0.1"\nedition = "2018"\n'
            f'[[bin]]\nname = "{name}"\npath = "{name}.rs"'
        )
        failure = (
            "Failed to write 📎 Clippy 📎 Cargo.toml file."
            if use_emoji()
            else "Failed to write Clippy Cargo.toml file."
        )
        try:
            Path(CLIPPY_CARGO_TOML_PATH).write_text(cargo_toml, encoding="utf-8")
        except OSError as exc:
            raise RuntimeError(failure) from exc
        # Build an executable as well, so clippy exercises can be run.
        _execute(
            ["rustc", path, "-o", temp_file(), *RUSTC_COLOR_ARGS], "Failed to compile!"
        )
        # A clean is needed for clippy to report every lint.
        _execute(
            ["cargo", "clean", "--manifest-path", CLIPPY_CARGO_TOML_PATH, *RUSTC_COLOR_ARGS],
            "Failed to run 'cargo clean'",
        )
        return _execute(
            [
                "cargo",
                "clippy",
                "--manifest-path",
                CLIPPY_CARGO_TOML_PATH,
                *RUSTC_COLOR_ARGS,
                "--",
                "-D",
                "warnings",
            ],
            "Failed to run 'compile' command.",
        )

    def _run(self) -> ExerciseOutput:
        arg = "--show-output" if self.mode is Mode.TEST else ""
        result = _execute([temp_file(), arg], "Failed to run 'run' command")
        output = _output_of(result)
        if result.returncode != 0:
            raise ExerciseRunError(output)
        return output

    def state(self) -> State:
        """Read the source and report whether the pending marker remains."""
        source = self.path.read_text(encoding="utf-8")
        if not I_AM_DONE_REGEX.search(source):
            return State()
        lines = _split_lines(source)
        matched = next(
            (i for i, line in enumerate(lines) if I_AM_DONE_REGEX.search(line)), None
        )
        if matched is None:
            raise RuntimeError("This should not happen at all")
        low = max(matched - CONTEXT, 0)
        high = matched + CONTEXT
        return State(
            tuple(
                ContextLine(line=line, number=i + 1, important=i == matched)
                for i, line in enumerate(lines[low : high + 1], start=low)
            )
        )

    def looks_done(self) -> bool:
        """Whether the pending marker has been removed from the source."""
        return self.state().done

    def __str__(self) -> str:
        return str(self.path)


def load_exercises(text: str) -> list[Exercise]:
    """Parse the exercise list from info.toml text."""
    data = tomllib.loads(text)
    try:
        entries = data["exercises"]
        return [
            Exercise(
                name=entry["name"],
                path=Path(entry["path"]),
                mode=Mode(entry["mode"]),
                hint=entry["hint"],
            )
            for entry in entries
        ]
    except KeyError as exc:
        raise ValueError(f"missing field {exc.args[0]!r}") from exc