# Copyright (c) 2025 The MoodGarden Authors
# This file is part of the MoodGarden - Your Wellness Garden project.
# Licensed under the MIT License - see the LICENSE file for details.


from sqlalchemy import Column, Integer, String, DateTime, JSON
from moodgarden.models.database import Base
from moodgarden.models.mood_entry import DEFAULT_USER_ID


def empty_garden() -> dict:
    return {"seedlings": 0, "flowers": 0, "trees": 0}


class UserProgress(Base):
    __tablename__ = "user_progress"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String, nullable=False, unique=True, index=True, default=DEFAULT_USER_ID)

    streak_count = Column(Integer, nullable=False, default=0)
    last_check_in = Column(DateTime, nullable=True)
    longest_streak = Column(Integer, nullable=False, default=0)

    # ✅ Garden & rewards
    garden_items = Column(JSON, nullable=False, default=empty_garden)
    achievements = Column(JSON, nullable=False, default=list)
    quests_completed = Column(Integer, nullable=False, default=0)
    milestones = Column(JSON, nullable=False, default=list)  # e.g. ["streak_3", "streak_7"]

    def __repr__(self):
        return f"<UserProgress user={self.user_id} streak={self.streak_count} longest={self.longest_streak}>"
