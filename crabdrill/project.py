"""Generation of rust-project.json for rust-analyzer."""

from __future__ import annotations

import glob
import json
import os
import subprocess
from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class Crate:
    """One crate entry of rust-project.json."""

    root_module: str
    edition: str = "2021"
    deps: list[str] = field(default_factory=list)
    # Lets rust-analyzer work inside test blocks.
    cfg: list[str] = field(default_factory=lambda: ["test"])

    def to_dict(self) -> dict:
        return {
            "root_module": self.root_module,
            "edition": self.edition,
            "deps": list(self.deps),
            "cfg": list(self.cfg),
        }


@dataclass
class RustAnalyzerProject:
    """The contents of rust-project.json."""

    sysroot_src: str = ""
    crates: list[Crate] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "sysroot_src": self.sysroot_src,
            "crates": [crate.to_dict() for crate in self.crates],
        }

    def write_to_disk(self, path="./rust-project.json") -> None:
        """Write the project description as compact JSON."""
        Path(path).write_text(json.dumps(self.to_dict(), separators=(",", ":")))

    def add_path(self, path) -> None:
        """Add a crate for the path if it is a .rs file."""
        if Path(path).suffix == ".rs":
            self.crates.append(Crate(root_module=str(path)))

    def exercises_to_json(self, root="./exercises") -> None:
        """Add a crate for every .rs file below root."""
        pattern = os.path.join(str(root), "**", "*")
        for path in sorted(glob.glob(pattern, recursive=True, include_hidden=True)):
            self.add_path(path)

    def get_sysroot_src(self) -> None:
        """Find the standard library sources, from RUST_SRC_PATH or rustc."""
        env_path = os.environ.get("RUST_SRC_PATH")
        if env_path is not None:
            self.sysroot_src = env_path
            return

        completed = subprocess.run(["rustc", "--print", "sysroot"], capture_output=True)
        output = completed.stdout.decode("utf-8", errors="replace")
        tokens = output.split()
        toolchain = tokens[0] if tokens else output

        print(f"Determined toolchain: {toolchain}\n")

        self.sysroot_src = str(
            Path(toolchain) / "lib" / "rustlib" / "src" / "rust" / "library"
        )