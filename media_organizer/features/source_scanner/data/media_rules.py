from pathlib import PurePath
from typing import Dict, Optional, Union
from media_organizer.core.common.enums import MediaKind


class MediaRules:
    """
    Central logic for which files the scanner catalogs.
    """

    VIDEO_EXTENSIONS = {".mp4", ".avi", ".mkv", ".mov", ".wmv", ".flv", ".webm"}
    IMAGE_EXTENSIONS = {".jpg", ".jpeg", ".png", ".gif", ".webp"}

    EXTENSION_KINDS: Dict[str, MediaKind] = {
        **{ext: MediaKind.VIDEO for ext in VIDEO_EXTENSIONS},
        **{ext: MediaKind.IMAGE for ext in IMAGE_EXTENSIONS},
    }

    @classmethod
    def classify(cls, filename: Union[str, PurePath]) -> Optional[MediaKind]:
        """
        Returns the MediaKind for a filename, or None if it isn't media.
        Matching is case-insensitive. Dotfiles like '.mp4' have no suffix.
        """
        suffix = PurePath(filename).suffix.lower()
        return cls.EXTENSION_KINDS.get(suffix)
