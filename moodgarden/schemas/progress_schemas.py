# Copyright (c) 2025 The MoodGarden Authors
# This file is part of the MoodGarden - Your Wellness Garden project.
# Licensed under the MIT License - see the LICENSE file for details.


from pydantic import BaseModel, Field, model_validator
from typing import Optional, List
from datetime import datetime

from moodgarden.models.mood_entry import Mood
from moodgarden.schemas.mood_schemas import CamelModel


class GardenItems(BaseModel):
    seedlings: int = 0
    flowers: int = 0
    trees: int = 0


class UserProgressOut(CamelModel):
    id: int
    user_id: str
    streak_count: int = 0
    last_check_in: Optional[datetime] = None
    garden_items: GardenItems = GardenItems()
    achievements: List[str] = []
    quests_completed: int = 0
    milestones: List[str] = []
    longest_streak: int = 0


class MoodTrendPoint(CamelModel):
    date: datetime
    mood: str
    value: int


class DashboardStatsOut(CamelModel):
    check_ins_this_month: int
    quests_completed: int
    current_streak: int
    longest_streak: int
    garden_items: GardenItems
    milestones: List[str]
    mood_trends: List[MoodTrendPoint]
    average_mood: float


class UserDataClearOut(CamelModel):
    user_id: str
    mood_entries_deleted: int
    progress_reset: bool


# ---------------------- IMPORT (accepts the export's own shape) ----------------------

class ImportedGardenItems(BaseModel):
    seedlings: int = Field(0, ge=0)
    flowers: int = Field(0, ge=0)
    trees: int = Field(0, ge=0)


class ImportedProgress(CamelModel):
    streak_count: int = Field(0, ge=0)
    last_check_in: Optional[datetime] = None
    garden_items: ImportedGardenItems = ImportedGardenItems()
    achievements: List[str] = []
    quests_completed: int = Field(0, ge=0)
    milestones: List[str] = []
    longest_streak: int = Field(0, ge=0)

    @model_validator(mode="after")
    def check_consistency(self):
        if self.longest_streak < self.streak_count:
            raise ValueError("longestStreak cannot be below streakCount")
        if len(set(self.milestones)) != len(self.milestones):
            raise ValueError("milestones must be unique")
        return self


class ImportedMoodEntry(CamelModel):
    mood: Mood
    journal: Optional[str] = None
    timestamp: datetime
    ai_prompt: Optional[str] = None
    prompt_completed: bool = False


class UserDataImport(CamelModel):
    version: int = 1
    user_progress: Optional[ImportedProgress] = None
    mood_entries: List[ImportedMoodEntry] = []


class UserDataImportOut(CamelModel):
    user_id: str
    mood_entries_imported: int
    progress_restored: bool
