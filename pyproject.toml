[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "crabdrill"
version = "5.6.1"
description = "Load, compile, run and check small Rust exercises, with Python reference solutions to them."
requires-python = ">=3.11"
keywords = ["rust", "exercises", "learning", "education", "rustc", "clippy", "rust-analyzer"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education :: Computer Aided Instruction (CAI)",
]
dependencies = []

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["crabdrill"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
