# Copyright (c) 2025 The MoodGarden Authors
# This file is part of the MoodGarden - Your Wellness Garden project.
# Licensed under the MIT License - see the LICENSE file for details.


from datetime import datetime
from typing import List, Optional
from sqlalchemy import inspect
from sqlalchemy.exc import InvalidRequestError, SQLAlchemyError
from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import ObjectDeletedError
from moodgarden.models.mood_entry import MoodEntry
from moodgarden.utils.errors import NotFoundError, StorageError
from moodgarden.utils.time_utils import utc_now


def _entry_key(entry: MoodEntry):
    identity = inspect(entry).identity
    return identity[0] if identity else None


class MoodEntryStore:
    """Append, point-update and newest-first reads of mood check-ins."""

    def __init__(self, db: Session):
        self.db = db

    def create(self, user_id: str, mood: str, journal: Optional[str] = None,
               ai_prompt: Optional[str] = None, timestamp: Optional[datetime] = None,
               prompt_completed: bool = False) -> MoodEntry:
        entry = MoodEntry(
            user_id=user_id,
            mood=mood,
            journal=journal or None,
            ai_prompt=ai_prompt or None,
            prompt_completed=prompt_completed,
            timestamp=timestamp or utc_now(),
        )
        try:
            self.db.add(entry)
            self.db.flush()
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to create mood entry: {e}") from e
        return entry

    def get(self, entry_id: int) -> Optional[MoodEntry]:
        try:
            return self.db.get(MoodEntry, entry_id)
        except ObjectDeletedError:
            # Stale identity-map copy of a row another session removed
            return None
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to load mood entry {entry_id}: {e}") from e

    def list_recent(self, user_id: str, limit: int = 30) -> List[MoodEntry]:
        try:
            return (
                self.db.query(MoodEntry)
                .filter(MoodEntry.user_id == user_id)
                .order_by(MoodEntry.timestamp.desc(), MoodEntry.id.desc())
                .limit(limit)
                .all()
            )
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to list mood entries: {e}") from e

    def refresh(self, entry: MoodEntry) -> MoodEntry:
        """Reloads the row; raises NotFoundError if it was deleted meanwhile."""
        # Read the key from the instance state, the attributes may be expired
        entry_id = _entry_key(entry)
        try:
            self.db.refresh(entry)
        except InvalidRequestError as e:
            # ObjectDeletedError included
            raise NotFoundError(f"Mood entry {entry_id} no longer exists") from e
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to reload mood entry {entry_id}: {e}") from e
        return entry

    def mark_prompt_completed(self, entry: MoodEntry) -> bool:
        """Returns True only when the entry flips from open to completed."""
        if entry.prompt_completed:
            return False
        entry.prompt_completed = True
        try:
            self.db.flush()
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to update mood entry {_entry_key(entry)}: {e}") from e
        return True

    def delete_for_user(self, user_id: str) -> int:
        try:
            return (
                self.db.query(MoodEntry)
                .filter(MoodEntry.user_id == user_id)
                .delete(synchronize_session="fetch")
            )
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to delete mood entries: {e}") from e
