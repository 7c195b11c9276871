"""
Recipe file errors.

Every error raised by the codec and the repository derives from
RecipeFileError, and also from the builtin exception a caller would expect
(OSError, ValueError, IndexError, LookupError).
"""

from pathlib import Path


class RecipeFileError(Exception):
    """Base exception for recipe file and repository errors."""


class RecipeFileIOError(RecipeFileError, OSError):
    """The recipe file could not be read or written."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"{self.path}: {reason}")

    def __str__(self) -> str:
        return f"{self.path}: {self.reason}"


class MalformedRecipeFileError(RecipeFileError, ValueError):
    """
    The recipe file does not follow the section format.

    Attributes:
        line_number: 1-based line the decoder stopped at (0 when the error
            concerns the end of the file)
        line: the offending line, without its terminator
    """

    def __init__(self, message: str, *, line_number: int = 0, line: str = "") -> None:
        self.message = message
        self.line_number = line_number
        self.line = line
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.line_number:
            return f"line {self.line_number}: {self.message} ({self.line!r})"
        return self.message


class RecipeIndexError(RecipeFileError, IndexError):
    def __init__(self, index: int, count: int) -> None:
        self.index = index
        self.count = count
        super().__init__(f"recipe index {index} out of range [0, {count})")


class RecipeNotFoundError(RecipeFileError, LookupError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"recipe not found: {name!r}")

    def __str__(self) -> str:
        return f"recipe not found: {self.name!r}"
