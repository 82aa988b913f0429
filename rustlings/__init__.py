"""Terminal messages, rust-project.json generation and worked solutions for Rust exercises."""

__version__ = "5.5.1"