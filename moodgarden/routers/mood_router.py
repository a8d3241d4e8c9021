# Copyright (c) 2025 The MoodGarden Authors
# This file is part of the MoodGarden - Your Wellness Garden project.
# Licensed under the MIT License - see the LICENSE file for details.


from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List, Optional

from moodgarden.models.database import get_db
from moodgarden.schemas.mood_schemas import MoodEntryCreate, MoodEntryOut, CheckInOut
from moodgarden.services.progress_tracker import ProgressTracker
from moodgarden.services.wellness_prompt_service import WellnessPromptGenerator, get_prompt_generator
from moodgarden.stores.mood_entry_store import MoodEntryStore
from moodgarden.stores.progress_store import ProgressStore
from moodgarden.utils.user_utils import get_user_id

router = APIRouter(prefix="/api/mood-entries", tags=["Mood Entries"])


@router.post("", response_model=CheckInOut)
def create_mood_entry(
    payload: MoodEntryCreate,
    db: Session = Depends(get_db),
    generator: WellnessPromptGenerator = Depends(get_prompt_generator),
    user_id: str = Depends(get_user_id)
):
    """
    Logs a check-in: asks for a reflective prompt first (best effort, never
    fails), then stores the entry and advances streak and garden together.
    """
    mood = payload.mood.value
    ai_prompt = generator.generate(mood, payload.journal)

    tracker = ProgressTracker(ProgressStore(db), MoodEntryStore(db))
    entry, _, new_milestones = tracker.submit_check_in(user_id, mood, payload.journal, ai_prompt)

    result = CheckInOut.model_validate(entry)
    result.new_milestones = new_milestones
    return result


@router.get("", response_model=List[MoodEntryOut])
def list_mood_entries(
    limit: int = Query(30, ge=1),
    db: Session = Depends(get_db),
    user_id: str = Depends(get_user_id)
):
    return MoodEntryStore(db).list_recent(user_id, limit=limit)


@router.patch("/{entry_id}/complete-prompt", response_model=Optional[MoodEntryOut])
def complete_prompt(entry_id: int, db: Session = Depends(get_db)):
    # Unknown ids answer with null rather than an error
    tracker = ProgressTracker(ProgressStore(db), MoodEntryStore(db))
    return tracker.complete_quest(entry_id)
