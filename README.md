# crabdrill

A Python library for working with small Rust exercises. It reads the
exercise list from an `info.toml` file, compiles each exercise with `rustc`
(or lints it with Clippy), runs the result and tells whether an exercise is
still marked as pending. It can also write a `rust-project.json` so that
rust-analyzer understands the exercise files.

`crabdrill.solutions` holds Python versions of the solved exercises.

## Installation

```console
pip install crabdrill
```

The package itself needs nothing beyond the standard library. Compiling
exercises needs a Rust toolchain on your `PATH` (`rustc`, and `cargo` for
Clippy exercises).

## Exercises

`crabdrill.exercise` describes exercises and works with them:

```python
from crabdrill.exercise import ExerciseFailed, load_exercises

exercises = load_exercises("info.toml")
exercise = exercises[0]

print(exercise)               # the exercise's path
print(exercise.looks_done())  # False while "// I AM NOT DONE" is in the file

try:
    with exercise.compile() as compiled:
        output = compiled.run()
        print(output.stdout)
except ExerciseFailed as failure:
    print(failure.output.stderr)
```

- `load_exercises(path="info.toml")` reads the `[[exercises]]` entries into
  `Exercise` objects (`name`, `path`, `mode`, `hint`). `Exercise.from_dict`
  builds one from a single entry.
- `Mode` is `COMPILE`, `TEST` or `CLIPPY` (`"compile"`, `"test"`, `"clippy"`
  in `info.toml`).
- `Exercise.compile()` builds the exercise into a temporary binary in the
  current directory. Test exercises are built as a test harness. Clippy
  exercises write `./exercises/clippy/Cargo.toml`, build a binary, then run
  `cargo clean` and `cargo clippy` with warnings treated as errors. On failure
  it raises `ExerciseFailed`, whose `output` holds the captured `stdout` and
  `stderr`.
- `CompiledExercise.run()` runs the binary (test harnesses with
  `--show-output`) and returns an `ExerciseOutput`, or raises `ExerciseFailed`
  if the binary exits unsuccessfully. `close()`, or leaving the `with` block,
  removes the temporary binary.
- `Exercise.state()` returns a `State`. `State.is_done()` is true when the
  file has no `I AM NOT DONE` marker. Otherwise `state.context` holds the
  `ContextLine`s (`line`, `number`, `important`) from two lines before the
  first marker to two lines after it.
- `temp_file()` gives the temporary binary path for the current process and
  thread; `clean()` removes it.

Set the `NO_EMOJI` environment variable to get a plain-text error message if
the Clippy `Cargo.toml` cannot be written.

## rust-analyzer support

```python
from crabdrill.project import RustAnalyzerProject

project = RustAnalyzerProject()
project.get_sysroot_src()
project.exercises_to_json("./exercises")
if project.crates:
    project.write_to_disk("./rust-project.json")
```

`get_sysroot_src()` takes the library source path from `RUST_SRC_PATH`, or
asks `rustc --print sysroot` and prints the toolchain it found.
`exercises_to_json()` adds a `Crate` (edition 2021, `cfg = ["test"]`) for
every `.rs` file below the given directory. `add_path()` adds a single one.
`write_to_disk()` writes compact JSON.

## Reference solutions

The modules under `crabdrill.solutions` show what each exercise is meant to
compute:

- `quizzes`: apple prices, a string transformer, report cards
- `people`: building a `Person` from `"name,age"`, loosely or strictly
- `colors`: building an RGB `Color` from integers
- `errors`: nametags, token costs, positive non-zero integers
- `messages`: a `State` updated by `ChangeColor`, `Echo`, `Move` and `Quit`
- `baskets`: fruit baskets and a football scores table
- `iterators`: capitalisation, exact division, factorial, progress counts
- `branching`, `strings`, `vecs`, `structs`, `traits`, `options`,
  `pointers`, `threads`

```python
from crabdrill.solutions.quizzes import calculate_price_of_apples
from crabdrill.solutions.iterators import factorial

calculate_price_of_apples(41)  # 41
factorial(4)                   # 24
```

## What it does not do

crabdrill is a library only. It installs no command: there is no
`crabdrill` program to verify all exercises in order, watch files for
changes, list exercises with their status, print hints or reset an exercise.
It has no progress bars or coloured terminal output. Those tasks are left to
code that calls `load_exercises`, `Exercise.compile` and `Exercise.state`.

## Development

```console
pip install -e ".[test]"
pytest
```