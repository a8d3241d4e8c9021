# Copyright (c) 2025 The MoodGarden Authors
# This file is part of the MoodGarden - Your Wellness Garden project.
# Licensed under the MIT License - see the LICENSE file for details.


from sqlalchemy import Column, Integer, String, Text, DateTime, Boolean
from moodgarden.models.database import Base
from moodgarden.utils.time_utils import utc_now
import enum

DEFAULT_USER_ID = "default_user"


class Mood(str, enum.Enum):
    happy = "happy"
    good = "good"
    neutral = "neutral"
    sad = "sad"
    anxious = "anxious"


class MoodEntry(Base):
    __tablename__ = "mood_entries"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String, nullable=False, default=DEFAULT_USER_ID, index=True)
    mood = Column(String, nullable=False)  # one of Mood
    journal = Column(Text, nullable=True)
    timestamp = Column(DateTime, nullable=False, default=utc_now)
    ai_prompt = Column(Text, nullable=True)
    prompt_completed = Column(Boolean, nullable=False, default=False)

    def __repr__(self):
        return f"<MoodEntry id={self.id} mood={self.mood} completed={self.prompt_completed}>"
