# Copyright (c) 2025 The MoodGarden Authors
# This file is part of the MoodGarden - Your Wellness Garden project.
# Licensed under the MIT License - see the LICENSE file for details.


from typing import List, Optional

from moodgarden.models.mood_entry import MoodEntry
from moodgarden.models.user_progress import UserProgress, empty_garden

MOOD_VALUES = {
    "happy": 5,
    "good": 4,
    "neutral": 3,
    "sad": 2,
    "anxious": 1,
}

DEFAULT_MOOD_VALUE = 3
TREND_LENGTH = 7
DASHBOARD_WINDOW = 30


def mood_value(mood: str) -> int:
    return MOOD_VALUES.get(mood, DEFAULT_MOOD_VALUE)


def build_dashboard_stats(entries: List[MoodEntry], progress: Optional[UserProgress]) -> dict:
    """
    Read-side summary for the dashboard. `entries` are newest first; the
    trend is the latest seven, oldest first so charts read left to right.
    """
    values = [mood_value(e.mood) for e in entries]
    trend = [
        {"date": e.timestamp, "mood": e.mood, "value": mood_value(e.mood)}
        for e in reversed(entries[:TREND_LENGTH])
    ]

    garden = empty_garden()
    if progress and progress.garden_items:
        garden.update(progress.garden_items)

    return {
        "checkInsThisMonth": len(entries),
        "questsCompleted": (progress.quests_completed or 0) if progress else 0,
        "currentStreak": (progress.streak_count or 0) if progress else 0,
        "longestStreak": (progress.longest_streak or 0) if progress else 0,
        "gardenItems": garden,
        "milestones": list(progress.milestones or []) if progress else [],
        "moodTrends": trend,
        "averageMood": sum(values) / len(values) if values else 0,
    }
