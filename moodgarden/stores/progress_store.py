# Copyright (c) 2025 The MoodGarden Authors
# This file is part of the MoodGarden - Your Wellness Garden project.
# Licensed under the MIT License - see the LICENSE file for details.


from typing import Optional
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from moodgarden.models.user_progress import UserProgress, empty_garden
from moodgarden.utils.errors import StorageError


class ProgressStore:
    """One progress row per user, created lazily with zeroed counters."""

    def __init__(self, db: Session):
        self.db = db

    def get(self, user_id: str) -> Optional[UserProgress]:
        try:
            return self.db.query(UserProgress).filter(UserProgress.user_id == user_id).first()
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to load progress for {user_id}: {e}") from e

    def get_or_create(self, user_id: str) -> UserProgress:
        progress = self.get(user_id)
        if progress:
            return progress

        progress = UserProgress(
            user_id=user_id,
            streak_count=0,
            last_check_in=None,
            longest_streak=0,
            garden_items=empty_garden(),
            achievements=[],
            quests_completed=0,
            milestones=[],
        )
        try:
            self.db.add(progress)
            self.db.flush()
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to create progress for {user_id}: {e}") from e
        return progress

    def save(self, progress: UserProgress) -> UserProgress:
        try:
            self.db.add(progress)
            self.db.flush()
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to save progress for {progress.user_id}: {e}") from e
        return progress

    def delete(self, user_id: str) -> bool:
        try:
            deleted = (
                self.db.query(UserProgress)
                .filter(UserProgress.user_id == user_id)
                .delete(synchronize_session="fetch")
            )
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to delete progress for {user_id}: {e}") from e
        return deleted > 0

    def commit(self) -> None:
        try:
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StorageError(f"Failed to commit progress update: {e}") from e

    def rollback(self) -> None:
        self.db.rollback()
