# File: media_organizer/core/common/errors.py

from pathlib import Path
from typing import Optional, Union


class MediaOrganizerError(Exception):
    """Base class that carries a default HTTP status code for API mapping."""

    default_status = 500

    def __init__(self, message: str = "", *, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code if status_code is not None else self.default_status


class ConstraintViolation(MediaOrganizerError):
    """A record with the same path is already in the catalog."""

    default_status = 409

    def __init__(self, path: Union[str, Path]) -> None:
        super().__init__(f"Media already cataloged: {path}")
        self.path = str(path)


class TransientFileError(MediaOrganizerError):
    """A single file could not be inspected (vanished, failed stat). Never aborts a scan."""

    def __init__(self, path: Union[str, Path], cause: Optional[BaseException] = None) -> None:
        super().__init__(f"Cannot read file {path}: {cause}")
        self.path = str(path)
        self.cause = cause


class ScanError(MediaOrganizerError):
    """Terminal failure of a whole scan."""


class RootNotFoundError(ScanError):
    default_status = 404

    def __init__(self, path: Union[str, Path], reason: str = "not found") -> None:
        super().__init__(f"Scan root {reason}: {path}")
        self.path = str(path)


class TraversalError(ScanError):
    """A directory could not be enumerated mid-walk."""

    def __init__(self, path: Union[str, Path], cause: Optional[BaseException] = None) -> None:
        super().__init__(f"Failed to read directory {path}: {cause}")
        self.path = str(path)
        self.cause = cause


class ScanInProgressError(MediaOrganizerError):
    default_status = 409

    def __init__(self) -> None:
        super().__init__("A scan is already running")
