# Copyright (c) 2025 The MoodGarden Authors
# This file is part of the MoodGarden - Your Wellness Garden project.
# Licensed under the MIT License - see the LICENSE file for details.


from typing import Optional
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from moodgarden.models.kindness_message import KindnessMessage
from moodgarden.utils.errors import StorageError
from moodgarden.utils.time_utils import utc_now


class KindnessMessageStore:
    def __init__(self, db: Session):
        self.db = db

    def create(self, message: str, is_ai_generated: bool = False) -> KindnessMessage:
        record = KindnessMessage(
            message=message,
            is_ai_generated=is_ai_generated,
            used=False,
            timestamp=utc_now(),
        )
        try:
            self.db.add(record)
            self.db.flush()
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to store kindness message: {e}") from e
        return record

    def find_unused(self) -> Optional[KindnessMessage]:
        # Oldest first, so messages are handed out in the order they arrived
        try:
            return (
                self.db.query(KindnessMessage)
                .filter(KindnessMessage.used.is_(False))
                .order_by(KindnessMessage.id.asc())
                .first()
            )
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to look up kindness messages: {e}") from e

    def mark_used(self, record: KindnessMessage) -> None:
        record.used = True
        try:
            self.db.flush()
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to mark kindness message {record.id} as used: {e}") from e

    def commit(self) -> None:
        try:
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StorageError(f"Failed to commit kindness message: {e}") from e

    def rollback(self) -> None:
        self.db.rollback()
