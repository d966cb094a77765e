"""Generate typed C++, Java and Rust accessors from sysprop description files."""

__version__ = "0.1.0"
