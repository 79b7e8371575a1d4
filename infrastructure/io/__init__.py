"""I/O utilities: optional text reads and atomic artifact writes."""

from infrastructure.io.fs import read_optional_text, write_files_atomic

__all__ = [
    "read_optional_text",
    "write_files_atomic",
]
