"""Running a single exercise without the completion prompt."""

from __future__ import annotations

from rich.console import Console

from .exercise import CompileError, Exercise, ExerciseRunError, Mode
from .ui import success, warn
from .verify import ExerciseFailed, test


def run(exercise: Exercise, verbose: bool = False) -> None:
    """Compile and run (or test) one exercise; raise ExerciseFailed on failure."""
    if exercise.mode is Mode.TEST:
        test(exercise, verbose)
    elif not _compile_and_run(exercise):
        raise ExerciseFailed(exercise)


def _compile_and_run(exercise: Exercise) -> bool:
    console = Console(highlight=False, soft_wrap=True)
    with console.status(f"Compiling {exercise}...") as status:
        try:
            compiled = exercise.compile()
        except CompileError as exc:
            status.stop()
            warn(f"Compilation of {exercise} failed!, Compiler error message:\n")
            print(exc.output.stderr)
            return False
        with compiled:
            status.update(f"Running {exercise}...")
            try:
                output = compiled.run()
            except ExerciseRunError as exc:
                status.stop()
                print(exc.output.stdout)
                print(exc.output.stderr)
                warn(f"Ran {exercise} with errors")
                return False
    print(output.stdout)
    success(f"Successfully ran {exercise}")
    return True