# File: media_organizer/core/database/base.py

from sqlalchemy.orm import declarative_base

# The shared registry. Feature models (e.g. MediaModel) inherit from this.
Base = declarative_base()
