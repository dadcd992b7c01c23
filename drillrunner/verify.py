"""Verifying exercises in order, prompting when one is still marked pending."""

from __future__ import annotations

from collections.abc import Iterable

from rich.console import Console
from rich.status import Status
from rich.text import Text

from .exercise import (
    CompiledExercise,
    CompileError,
    Exercise,
    ExerciseRunError,
    Mode,
)
from .ui import success, use_emoji, warn


class ExerciseFailed(Exception):
    """An exercise did not compile, run, pass, or is still marked pending."""

    def __init__(self, exercise: Exercise) -> None:
        super().__init__(f"{exercise} is not finished")
        self.exercise = exercise


class _Aborted(Exception):
    """A step failed and its output has already been shown."""


def _console() -> Console:
    return Console(highlight=False, soft_wrap=True)


def _status(message: str) -> Status:
    return _console().status(message)


def verify(exercises: Iterable[Exercise], verbose: bool = False) -> None:
    """Check each exercise in turn; raise ExerciseFailed at the first that fails."""
    for exercise in exercises:
        try:
            if exercise.mode is Mode.TEST:
                finished = _compile_and_test(exercise, interactive=True, verbose=verbose)
            elif exercise.mode is Mode.COMPILE:
                finished = _compile_and_run_interactively(exercise)
            else:
                finished = _compile_only(exercise)
        except _Aborted:
            finished = False
        if not finished:
            raise ExerciseFailed(exercise)


def test(exercise: Exercise, verbose: bool = False) -> None:
    """Compile and run an exercise's tests without prompting."""
    try:
        _compile_and_test(exercise, interactive=False, verbose=verbose)
    except _Aborted as exc:
        raise ExerciseFailed(exercise) from exc


def _compile(exercise: Exercise, status: Status) -> CompiledExercise:
    try:
        return exercise.compile()
    except CompileError as exc:
        status.stop()
        warn(f"Compiling of {exercise} failed! Please try again. Here's the output:")
        print(exc.output.stderr)
        raise _Aborted from exc


def _compile_only(exercise: Exercise) -> bool:
    with _status(f"Compiling {exercise}...") as status:
        _compile(exercise, status).close()
    success(f"Successfully compiled {exercise}!")
    return prompt_for_completion(exercise, None)


def _compile_and_run_interactively(exercise: Exercise) -> bool:
    with _status(f"Compiling {exercise}...") as status, _compile(exercise, status) as compiled:
        status.update(f"Running {exercise}...")
        try:
            output = compiled.run()
        except ExerciseRunError as exc:
            status.stop()
            warn(f"Ran {exercise} with errors")
            print(exc.output.stdout)
            print(exc.output.stderr)
            raise _Aborted from exc
        status.stop()
        success(f"Successfully ran {exercise}!")
        return prompt_for_completion(exercise, output.stdout)


def _compile_and_test(exercise: Exercise, interactive: bool, verbose: bool) -> bool:
    with _status(f"Testing {exercise}...") as status, _compile(exercise, status) as compiled:
        try:
            output = compiled.run()
        except ExerciseRunError as exc:
            status.stop()
            warn(f"Testing of {exercise} failed! Please try again. Here's the output:")
            print(exc.output.stdout)
            raise _Aborted from exc
        status.stop()
        if verbose:
            print(output.stdout)
        success(f"Successfully tested {exercise}")
        return prompt_for_completion(exercise, None) if interactive else True


def prompt_for_completion(exercise: Exercise, prompt_output: str | None) -> bool:
    """Return True if the exercise is done; otherwise show where the marker is."""
    state = exercise.state()
    if state.done:
        return True

    emoji = use_emoji()
    clippy_message = (
        "The code is compiling, and 📎 Clippy 📎 is happy!"
        if emoji
        else "The code is compiling, and Clippy is happy!"
    )
    success_message = {
        Mode.COMPILE: "The code is compiling!",
        Mode.TEST: "The code is compiling, and the tests pass!",
        Mode.CLIPPY: clippy_message,
    }[exercise.mode]

    console = _console()
    print()
    if emoji:
        print(f"🎉 🎉  {success_message} 🎉 🎉")
    else:
        print(f"~*~ {success_message} ~*~")
    print()

    if prompt_output is not None:
        print("Output:")
        console.print(separator())
        print(prompt_output)
        console.print(separator())
        print()

    print("You can keep working on this exercise,")
    console.print(
        Text.assemble(
            "or jump into the next one by removing the ",
            ("`I AM NOT DONE`", "bold"),
            " comment:",
        )
    )
    print()
    for context_line in state.context:
        console.print(
            Text.assemble(
                (f"{context_line.number:>2}", "bold blue"),
                " ",
                ("|", "blue"),
                "  ",
                Text(context_line.line, style="bold" if context_line.important else ""),
            )
        )
    return False


def separator() -> Text:
    """The bold rule framing program output."""
    return Text("====================", style="bold")