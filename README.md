# drillrunner

`drillrunner` walks you through a set of small programming exercises. It
compiles each exercise, runs it or its tests, tells you what went wrong, and
moves you on to the next exercise once you mark the current one as finished.

## Installation

```
pip install drillrunner
```

The exercises are built with `rustc` (and `cargo clippy` for lint
exercises), so those tools must be on your `PATH`. `drillrunner` checks for
`rustc` on start-up and stops with a message if it cannot find it.

## The exercise directory

Run `drillrunner` from the directory that holds the exercises. That
directory must contain an `info.toml` describing them, in order:

```toml
[[exercises]]
name = "variables1"
path = "exercises/variables/variables1.rs"
mode = "compile"
hint = "Declare the variable with `let`."

[[exercises]]
name = "tests1"
path = "exercises/tests/tests1.rs"
mode = "test"
hint = "Look at what the assertion checks."
```

Every entry needs `name`, `path`, `mode` and `hint`. `mode` is one of:

- `compile` – build the file and run the resulting program;
- `test` – build the file as a test harness and run its tests;
- `clippy` – build the file and lint it with `cargo clippy`, treating every
  warning as an error. For these, a `Cargo.toml` is written to
  `exercises/clippy/Cargo.toml`.

An exercise counts as unfinished while its source still contains a line
comment reading `I AM NOT DONE`. When such an exercise compiles and passes,
`drillrunner` shows the lines around that comment; remove it to move on.

Running `drillrunner` with no command prints a welcome banner followed by the
contents of `default_out.txt` from the same directory.

## Commands

```
drillrunner verify            # check every exercise in order, stop at the first unfinished one
drillrunner watch             # like verify, then re-check whenever an exercise file changes
drillrunner run NAME          # build and run (or test) a single exercise, without the prompt
drillrunner hint NAME         # print the hint for an exercise
drillrunner list              # table of exercises with their Done/Pending status
drillrunner --version         # print the version
```

Options:

- `--nocapture` – show the output of test exercises as well.
- `list --paths` / `list --names` – print only paths or only names.
- `list --filter TEXT` – only exercises whose name or path contains one of
  the comma-separated patterns (the patterns are lower-cased first).
- `list --solved` / `list --unsolved` – only finished or only unfinished
  exercises.

`list` finishes with a progress line, for example
`Progress: You completed 3 / 10 exercises (30.00 %).`

`watch` looks for changes to `.rs` files under `./exercises`. While it is
running, type `hint` to see the hint for the exercise you are stuck on, or
`clear` to clear the screen. Once every exercise passes it prints a closing
message and exits.

Set the `NO_EMOJI` environment variable to use plain symbols instead of
emoji in messages.

Commands exit with status 1 when an exercise fails to build, run or pass,
when a named exercise does not exist, when no `info.toml` is found, when
`rustc` cannot be run, or when the command line is not understood.

## Using it from Python

The command is `drillrunner.cli.main`, which takes an optional list of
arguments and returns the exit status. The pieces behind it can be used
directly:

```python
from pathlib import Path

from drillrunner.exercise import load_exercises
from drillrunner.verify import ExerciseFailed, verify

exercises = load_exercises(Path("info.toml").read_text(encoding="utf-8"))
print([e.name for e in exercises if not e.looks_done()])

try:
    verify(exercises)
except ExerciseFailed as exc:
    print(exc.exercise.hint)
```

`drillrunner.cli.list_exercises` returns the lines of the listing instead of
printing them, and `drillrunner.run.run` builds and runs one exercise,
raising `ExerciseFailed` if it does not succeed.

## Reference solutions

The `drillrunner.exercises` package holds worked solutions to the exercise
topics — `basics`, `conversions`, `containers`, `primitives`, `errors`,
`iterators`, `smart_pointers`, `structs`, `messages`, `generics` and
`ownership` — as plain Python functions and classes, for example:

```python
from drillrunner.exercises.basics import calculate_apple_price, fizz_if_foo

calculate_apple_price(65)   # 65
fizz_if_foo("fuzz")         # "bar"
```

## What it does not include

`drillrunner` does not ship the exercise source files, `info.toml` or
`default_out.txt`; it works on an exercise directory you already have. It
does not install or manage `rustc` or `cargo` either.

## Running the tests

```
pip install "drillrunner[test]"
pytest
```