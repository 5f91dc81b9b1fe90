# File: media_organizer/core/config/settings.py

import os
from pathlib import Path


class Settings:
    # --- Paths ---
    # media_organizer/core/config/settings.py -> config -> core -> media_organizer -> ROOT
    BASE_DIR: Path = Path(__file__).resolve().parent.parent.parent.parent
    DATA_DIR: Path = Path(os.getenv("MEDIA_ORGANIZER_DATA_DIR", str(BASE_DIR / "data")))

    # --- Server ---
    HOST: str = os.getenv("MEDIA_ORGANIZER_HOST", "0.0.0.0")
    PORT: int = int(os.getenv("MEDIA_ORGANIZER_PORT", "9999"))

    # --- Logging ---
    LOG_LEVEL: str = os.getenv("MEDIA_ORGANIZER_LOG_LEVEL", "INFO").upper()

    @property
    def DATABASE_URL(self) -> str:
        # Any SQLAlchemy URL works (e.g. postgresql://...), SQLite file is the default
        custom = os.getenv("MEDIA_ORGANIZER_DATABASE_URL")
        if custom:
            return custom
        return f"sqlite:///{self.DATA_DIR / 'media.db'}"

    def ensure_dirs(self):
        """Creates the data directory if it doesn't exist."""
        self.DATA_DIR.mkdir(parents=True, exist_ok=True)


settings = Settings()
