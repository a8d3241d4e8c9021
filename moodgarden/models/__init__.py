# Copyright (c) 2025 The MoodGarden Authors
# This file is part of the MoodGarden - Your Wellness Garden project.
# Licensed under the MIT License - see the LICENSE file for details.


from .mood_entry import MoodEntry, Mood
from .kindness_message import KindnessMessage
from .user_progress import UserProgress
