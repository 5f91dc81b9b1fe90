# File: media_organizer/core/common/enums.py

from enum import Enum, unique


@unique
class MediaKind(str, Enum):
    VIDEO = "video"
    IMAGE = "image"


@unique
class FileOutcome(str, Enum):
    """What the scanner did with a single walked entry."""
    ADDED = "added"
    UNCLASSIFIED = "unclassified"
    ALREADY_CATALOGED = "already_cataloged"
    FAILED = "failed"
