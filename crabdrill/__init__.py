"""Load, compile, run and check Rust exercises, and describe them for rust-analyzer."""

__version__ = "5.6.1"