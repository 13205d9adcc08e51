"""Exercises: loading, compiling, running and checking their state."""

from __future__ import annotations

import enum
import os
import re
import subprocess
import threading
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

RUSTC_COLOR_ARGS = ("--color", "always")
RUSTC_EDITION_ARGS = ("--edition", "2021")
I_AM_DONE_REGEX = re.compile(r"^\s*///?\s*I\s+AM\s+NOT\s+DONE", re.MULTILINE)
CONTEXT = 2
CLIPPY_CARGO_TOML_PATH = "./exercises/clippy/Cargo.toml"


def temp_file() -> str:
    """Return a temporary binary path unique to this process and thread."""
    thread_id = "".join(c for c in f"ThreadId({threading.get_ident()})" if c.isalnum())
    return f"./temp_{os.getpid()}_{thread_id}"


def clean() -> None:
    """Remove the temporary binary, ignoring any error."""
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
    """A source line shown around the pending marker."""

    line: str
    number: int
    important: bool


@dataclass(frozen=True)
class State:
    """Done when context is None, otherwise pending with the given context."""

    context: tuple[ContextLine, ...] | None = None

    @classmethod
    def done(cls) -> "State":
        return cls(None)

    @classmethod
    def pending(cls, context) -> "State":
        return cls(tuple(context))

    def is_done(self) -> bool:
        return self.context is None


@dataclass(frozen=True)
class ExerciseOutput:
    """Captured output of a finished process."""

    stdout: str
    stderr: str


class ExerciseFailed(Exception):
    """Compiling or running an exercise failed."""

    def __init__(self, output: ExerciseOutput):
        super().__init__(output.stderr or output.stdout)
        self.output = output


def _output(completed: subprocess.CompletedProcess) -> ExerciseOutput:
    return ExerciseOutput(
        stdout=(completed.stdout or b"").decode("utf-8", errors="replace"),
        stderr=(completed.stderr or b"").decode("utf-8", errors="replace"),
    )


def _execute(args: list[str], error_message: str) -> subprocess.CompletedProcess:
    try:
        return subprocess.run(args, capture_output=True)
    except OSError as exc:
        raise RuntimeError(error_message) from exc


def _lines(text: str) -> list[str]:
    parts = text.split("\n")
    if parts and parts[-1] == "":
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


class CompiledExercise:
    """A successfully compiled exercise; its binary is removed on close."""

    def __init__(self, exercise: "Exercise"):
        self.exercise = exercise

    def run(self) -> ExerciseOutput:
        """Run the binary; raise ExerciseFailed if it exits unsuccessfully."""
        return self.exercise._run()

    def close(self) -> None:
        clean()

    def __enter__(self) -> "CompiledExercise":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


@dataclass
class Exercise:
    """One exercise as described in info.toml."""

    name: str
    path: Path
    mode: Mode
    hint: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Exercise":
        return cls(
            name=str(data["name"]),
            path=Path(data["path"]),
            mode=Mode(data["mode"]),
            hint=str(data["hint"]),
        )

    def _rustc(self, *extra: str) -> list[str]:
        return [
            "rustc",
            *extra,
            str(self.path),
            "-o",
            temp_file(),
            *RUSTC_COLOR_ARGS,
            *RUSTC_EDITION_ARGS,
        ]

    def _compile_clippy(self) -> subprocess.CompletedProcess:
        cargo_toml = (
            "[package]\n"
            f'name = "{self.name}"\n'
            'version = "0.0.1"\n'
            'edition = "2021"\n'
            "[[bin]]\n"
            f'name = "{self.name}"\n'
            f'path = "{self.name}.rs"'
        )
        error_message = (
            "Failed to write Clippy Cargo.toml file."
            if "NO_EMOJI" in os.environ
            else "Failed to write 📎 Clippy 📎 Cargo.toml file."
        )
        try:
            Path(CLIPPY_CARGO_TOML_PATH).write_text(cargo_toml)
        except OSError as exc:
            raise RuntimeError(error_message) from exc
        # Build a binary too so clippy exercises can be run afterwards.
        _execute(self._rustc(), "Failed to compile!")
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
                "-D",
                "clippy::float_cmp",
            ],
            "Failed to run 'compile' command.",
        )

    def compile(self) -> CompiledExercise:
        """Compile the exercise; raise ExerciseFailed with the compiler output on failure."""
        if self.mode is Mode.COMPILE:
            completed = _execute(self._rustc(), "Failed to run 'compile' command.")
        elif self.mode is Mode.TEST:
            completed = _execute(self._rustc("--test"), "Failed to run 'compile' command.")
        else:
            completed = self._compile_clippy()

        if completed.returncode == 0:
            return CompiledExercise(self)
        clean()
        raise ExerciseFailed(_output(completed))

    def _run(self) -> ExerciseOutput:
        args = [temp_file()]
        if self.mode is Mode.TEST:
            args.append("--show-output")
        completed = _execute(args, "Failed to run 'run' command")
        output = _output(completed)
        if completed.returncode != 0:
            raise ExerciseFailed(output)
        return output

    def state(self) -> State:
        """Return Done, or Pending with the lines around the first pending marker."""
        source = self.path.read_text(encoding="utf-8")
        if not I_AM_DONE_REGEX.search(source):
            return State.done()

        lines = _lines(source)
        matched = next(
            (i for i, line in enumerate(lines) if I_AM_DONE_REGEX.search(line)), None
        )
        if matched is None:
            raise RuntimeError("This should not happen at all")

        low = max(matched - CONTEXT, 0)
        high = matched + CONTEXT
        return State.pending(
            ContextLine(line=line, number=i + 1, important=i == matched)
            for i, line in enumerate(lines)
            if low <= i <= high
        )

    def looks_done(self) -> bool:
        """Whether the pending marker has been removed from the file."""
        return self.state().is_done()

    def __str__(self) -> str:
        return str(self.path)


def load_exercises(path="info.toml") -> list[Exercise]:
    """Read the exercise list from an info.toml file."""
    with open(path, "rb") as handle:
        data = tomllib.load(handle)
    return [Exercise.from_dict(entry) for entry in data["exercises"]]