# Copyright (c) 2025 The MoodGarden Authors
# This file is part of the MoodGarden - Your Wellness Garden project.
# Licensed under the MIT License - see the LICENSE file for details.

from pydantic import Field
from datetime import datetime

from moodgarden.models.kindness_message import MAX_MESSAGE_LENGTH
from moodgarden.schemas.mood_schemas import CamelModel


class KindnessMessageCreate(CamelModel):
    message: str = Field(..., min_length=1, max_length=MAX_MESSAGE_LENGTH)


class KindnessMessageOut(CamelModel):
    id: int
    message: str
    is_ai_generated: bool = False
    used: bool = False
    timestamp: datetime
