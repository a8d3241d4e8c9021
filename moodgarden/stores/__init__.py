# Copyright (c) 2025 The MoodGarden Authors
# This file is part of the MoodGarden - Your Wellness Garden project.
# Licensed under the MIT License - see the LICENSE file for details.


from .mood_entry_store import MoodEntryStore
from .kindness_message_store import KindnessMessageStore
from .progress_store import ProgressStore
