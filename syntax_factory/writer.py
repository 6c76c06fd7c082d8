"""
File writer for generated factory sources.

Writes go through a temporary file in the target directory that is
renamed over the target, so an interrupted run never leaves a truncated
factory file behind.
"""

from __future__ import annotations

import tempfile
from collections.abc import Callable
from pathlib import Path


class OutputValidationError(Exception):
    """Raised when generated text fails the pre-write check."""


class AtomicWriter:
    """Handles atomic file writes with optional validation."""

    def __init__(self, validate: Callable[[str], None] | None = None):
        """Initialize the atomic writer.

        Args:
            validate: Optional validation function, raising on bad content
        """
        self._validate = validate or self._default_validate

    def write(self, path: Path, content: str, validate: bool = False) -> None:
        """Write content to file atomically.

        Args:
            path: Target file path
            content: Content to write
            validate: Whether to validate before replacing the target

        Raises:
            OutputValidationError: If validation fails
            OSError: If file operations fail
        """
        path.parent.mkdir(parents=True, exist_ok=True)

        # Same directory so the final rename stays on one filesystem
        temp_fd, temp_path_str = tempfile.mkstemp(
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            text=True,
        )
        temp_path = Path(temp_path_str)

        try:
            # newline="" keeps the configured line separator untranslated
            with open(temp_fd, "w", encoding="utf-8", newline="") as f:
                f.write(content)

            if validate:
                self._validate(content)

            temp_path.replace(path)

        except Exception:
            if temp_path.exists():
                try:
                    temp_path.unlink()
                except OSError:
                    pass  # Best effort cleanup
            raise

    def write_direct(self, path: Path, content: str, validate: bool = False) -> None:
        """Write content straight to the target, without a temporary file."""
        if validate:
            self._validate(content)
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(content)

    def _default_validate(self, content: str) -> None:
        """Basic structural checks on generated TypeScript.

        Raises:
            OutputValidationError: If validation fails
        """
        if not content.strip():
            raise OutputValidationError("Generated code is empty")

        open_braces = content.count("{")
        close_braces = content.count("}")
        if open_braces != close_braces:
            raise OutputValidationError(f"Generated code has unbalanced braces: {open_braces} open, {close_braces} close")
