# Copyright (c) 2025 The MoodGarden Authors
# This file is part of the MoodGarden - Your Wellness Garden project.
# Licensed under the MIT License - see the LICENSE file for details.


from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import Optional, List
from datetime import datetime

from moodgarden.models.mood_entry import Mood


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class MoodEntryCreate(CamelModel):
    mood: Mood
    journal: Optional[str] = None


class MoodEntryOut(CamelModel):
    id: int
    user_id: str
    mood: str
    journal: Optional[str] = None
    timestamp: datetime
    ai_prompt: Optional[str] = None
    prompt_completed: bool = False


class CheckInOut(MoodEntryOut):
    new_milestones: List[str] = []
