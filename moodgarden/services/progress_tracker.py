# Copyright (c) 2025 The MoodGarden Authors
# This file is part of the MoodGarden - Your Wellness Garden project.
# Licensed under the MIT License - see the LICENSE file for details.


import logging
from datetime import datetime
from typing import List, Optional, Tuple

from moodgarden.models.mood_entry import Mood, MoodEntry
from moodgarden.models.user_progress import UserProgress, empty_garden
from moodgarden.stores.mood_entry_store import MoodEntryStore
from moodgarden.stores.progress_store import ProgressStore
from moodgarden.utils.errors import NotFoundError, StorageError
from moodgarden.utils.time_utils import as_naive_utc, days_between, utc_now
from moodgarden.utils.user_locks import user_lock

logger = logging.getLogger(__name__)

# ---------------------------
# ✅ Streak & Garden Rules
# ---------------------------

STREAK_MILESTONES = (3, 7, 14, 30, 50, 100)

WEEK_STREAK = 7     # bonus flower from here on
MONTH_STREAK = 30   # bonus tree from here on

MOOD_GARDEN_ITEM = {
    Mood.happy.value: "flowers",
    Mood.good.value: "seedlings",
    Mood.neutral.value: "seedlings",
}


def milestone_tag(threshold: int) -> str:
    return f"streak_{threshold}"


def next_streak(streak_count: int, last_check_in: Optional[datetime], now: datetime) -> int:
    """
    Streak after a check-in at `now`:
    - next calendar day   -> streak continues
    - same calendar day   -> unchanged, a day only counts once
    - anything else       -> reset to 1 (gap, first check-in, clock skew)
    """
    if last_check_in is None:
        return 1

    days_diff = days_between(last_check_in, now)
    if days_diff == 1:
        return streak_count + 1
    if days_diff == 0:
        return streak_count
    return 1


def garden_rewards(mood: str, streak: int) -> dict:
    rewards = empty_garden()

    item = MOOD_GARDEN_ITEM.get(mood)
    if item:
        rewards[item] += 1

    if streak >= WEEK_STREAK:
        rewards["flowers"] += 1
    if streak >= MONTH_STREAK:
        rewards["trees"] += 1

    return rewards


def reached_milestones(streak: int, awarded: List[str]) -> List[str]:
    # Exact match only, a streak that skips past a threshold is not credited
    return [
        milestone_tag(threshold)
        for threshold in STREAK_MILESTONES
        if streak == threshold and milestone_tag(threshold) not in awarded
    ]


def apply_check_in(progress: UserProgress, mood: str, now: datetime) -> dict:
    """
    Pure state transition for one check-in. Reads `progress`, returns the
    new field values plus `new_milestones`; nothing is mutated.
    """
    now = as_naive_utc(now)
    streak_count = progress.streak_count or 0
    longest_streak = progress.longest_streak or 0
    last_check_in = as_naive_utc(progress.last_check_in) if progress.last_check_in else None

    new_streak = next_streak(streak_count, last_check_in, now)

    milestones = list(progress.milestones or [])
    new_milestones = reached_milestones(new_streak, milestones)
    milestones.extend(new_milestones)

    garden = empty_garden()
    garden.update(progress.garden_items or {})
    for item, count in garden_rewards(mood, new_streak).items():
        garden[item] = garden.get(item, 0) + count

    return {
        "streak_count": new_streak,
        "last_check_in": now,
        "longest_streak": max(longest_streak, new_streak),
        "garden_items": garden,
        "milestones": milestones,
        "new_milestones": new_milestones,
    }


# ---------------------------
# ✅ Tracker Service
# ---------------------------

class ProgressTracker:
    """
    Owns the per-user progress row. Every write runs under the user's lock
    and commits as one unit, so concurrent check-ins never interleave.
    """

    def __init__(self, progress_store: ProgressStore, entry_store: MoodEntryStore):
        self.progress_store = progress_store
        self.entry_store = entry_store

    def get_progress(self, user_id: str) -> UserProgress:
        progress = self.progress_store.get(user_id)
        if progress:
            return progress

        # First visit creates the zeroed row
        with user_lock(user_id):
            progress = self.progress_store.get_or_create(user_id)
            self.progress_store.commit()
        return progress

    def _advance(self, user_id: str, mood: str, now: datetime) -> Tuple[UserProgress, List[str]]:
        progress = self.progress_store.get_or_create(user_id)
        update = apply_check_in(progress, mood, now)
        new_milestones = update.pop("new_milestones")

        for field, value in update.items():
            setattr(progress, field, value)
        self.progress_store.save(progress)

        if new_milestones:
            logger.info(f"🏅 User {user_id} reached {', '.join(new_milestones)}")
        return progress, new_milestones

    def record_check_in(self, user_id: str, mood: str,
                        now: Optional[datetime] = None) -> Tuple[UserProgress, List[str]]:
        now = now or utc_now()
        with user_lock(user_id):
            try:
                progress, new_milestones = self._advance(user_id, mood, now)
                self.progress_store.commit()
            except StorageError:
                self.progress_store.rollback()
                logger.exception(f"❌ Check-in progress update failed for user {user_id}")
                raise
        return progress, new_milestones

    def submit_check_in(self, user_id: str, mood: str, journal: Optional[str] = None,
                        ai_prompt: Optional[str] = None,
                        now: Optional[datetime] = None) -> Tuple[MoodEntry, UserProgress, List[str]]:
        """Stores the entry and advances progress in a single commit."""
        now = now or utc_now()
        with user_lock(user_id):
            try:
                entry = self.entry_store.create(user_id, mood, journal, ai_prompt, timestamp=now)
                progress, new_milestones = self._advance(user_id, mood, now)
                logger.info(f"🌱 Check-in #{entry.id} ({mood}) for {user_id}, streak now {progress.streak_count}")
                self.progress_store.commit()
            except StorageError:
                self.progress_store.rollback()
                logger.exception(f"❌ Check-in failed for user {user_id}")
                raise

        return entry, progress, new_milestones

    def complete_quest(self, entry_id: int) -> Optional[MoodEntry]:
        """
        Marks an entry's prompt as done. Only the first completion counts a
        quest and plants a tree. Returns None for an unknown entry, or one
        deleted by a concurrent clear.
        """
        entry = self.entry_store.get(entry_id)
        if entry is None:
            logger.info(f"🔍 Complete-prompt for unknown entry {entry_id}")
            return None

        user_id = entry.user_id
        with user_lock(user_id):
            try:
                # Another request may have completed it while we waited
                self.entry_store.refresh(entry)
                if self.entry_store.mark_prompt_completed(entry):
                    progress = self.progress_store.get_or_create(user_id)
                    garden = empty_garden()
                    garden.update(progress.garden_items or {})
                    garden["trees"] += 1

                    progress.garden_items = garden
                    progress.quests_completed = (progress.quests_completed or 0) + 1
                    self.progress_store.save(progress)
                    logger.info(f"🌳 Quest completed for entry {entry_id} ({user_id})")
                self.progress_store.commit()
            except NotFoundError:
                self.progress_store.rollback()
                logger.info(f"🔍 Entry {entry_id} was removed before its prompt could be completed")
                return None
            except StorageError:
                self.progress_store.rollback()
                logger.exception(f"❌ Quest completion failed for entry {entry_id}")
                raise
        return entry
