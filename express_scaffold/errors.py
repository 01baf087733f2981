"""Typed errors raised by the scaffolding engine and its operations."""

from __future__ import annotations


class ScaffoldError(Exception):
    """Base class for every error the CLI reports as a failed operation."""


class MissingDependencyError(ScaffoldError):
    """Raised when a structural folder a generator depends on is absent."""

    def __init__(self, folder: str):
        self.folder = folder
        super().__init__(
            f"Error: '{folder}' folder does not exist. "
            f"Run 'express-scaffold new' first."
        )


class InvalidParameterError(ScaffoldError):
    """Raised when a required user-supplied parameter is missing or unusable."""

    def __init__(self, parameter: str, message: str = ""):
        self.parameter = parameter
        super().__init__(message or f"Parameter '{parameter}' cannot be empty.")


class InstallerFailureError(ScaffoldError):
    """Raised when the dependency installer reports a failure.

    The installer's message is kept verbatim.
    """

    def __init__(self, message: str):
        self.message = message
        super().__init__(f"Error installing packages: {message}")
