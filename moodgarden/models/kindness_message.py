# Copyright (c) 2025 The MoodGarden Authors
# This file is part of the MoodGarden - Your Wellness Garden project.
# Licensed under the MIT License - see the LICENSE file for details.


from sqlalchemy import Column, Integer, Text, DateTime, Boolean
from moodgarden.models.database import Base
from moodgarden.utils.time_utils import utc_now

MAX_MESSAGE_LENGTH = 200


class KindnessMessage(Base):
    __tablename__ = "kindness_messages"

    id = Column(Integer, primary_key=True, index=True)
    message = Column(Text, nullable=False)
    is_ai_generated = Column(Boolean, nullable=False, default=False)
    used = Column(Boolean, nullable=False, default=False, index=True)
    timestamp = Column(DateTime, nullable=False, default=utc_now)

    def __repr__(self):
        return f"<KindnessMessage id={self.id} ai={self.is_ai_generated} used={self.used}>"
