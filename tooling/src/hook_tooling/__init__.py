"""Git hook tooling for Rust/Python repositories."""

__version__ = "0.1.0"
