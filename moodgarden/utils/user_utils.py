# Copyright (c) 2025 The MoodGarden Authors
# This file is part of the MoodGarden - Your Wellness Garden project.
# Licensed under the MIT License - see the LICENSE file for details.


import os
from typing import Optional
from fastapi import Header

from moodgarden.models.mood_entry import DEFAULT_USER_ID


def get_user_id(x_user_id: Optional[str] = Header(None)) -> str:
    """
    Identity of the caller. There is no login: the header is trusted and
    falls back to the single default user.
    """
    if x_user_id and x_user_id.strip():
        return x_user_id.strip()
    return os.getenv("DEFAULT_USER_ID", DEFAULT_USER_ID)
