# Copyright (c) 2025 The MoodGarden Authors
# This file is part of the MoodGarden - Your Wellness Garden project.
# Licensed under the MIT License - see the LICENSE file for details.


from typing import Any

from fastapi import APIRouter, Body, Depends
from sqlalchemy.orm import Session

from moodgarden.models.database import get_db
from moodgarden.schemas.progress_schemas import UserProgressOut, DashboardStatsOut, UserDataClearOut, UserDataImportOut
from moodgarden.services.dashboard_service import build_dashboard_stats, DASHBOARD_WINDOW
from moodgarden.services.data_service import export_user_data, clear_user_data, import_user_data
from moodgarden.services.progress_tracker import ProgressTracker
from moodgarden.stores.mood_entry_store import MoodEntryStore
from moodgarden.stores.progress_store import ProgressStore
from moodgarden.utils.user_utils import get_user_id

router = APIRouter(prefix="/api", tags=["Progress"])


@router.get("/user-progress", response_model=UserProgressOut)
def get_user_progress(db: Session = Depends(get_db), user_id: str = Depends(get_user_id)):
    tracker = ProgressTracker(ProgressStore(db), MoodEntryStore(db))
    return tracker.get_progress(user_id)


@router.get("/dashboard-stats", response_model=DashboardStatsOut)
def dashboard_stats(db: Session = Depends(get_db), user_id: str = Depends(get_user_id)):
    entries = MoodEntryStore(db).list_recent(user_id, limit=DASHBOARD_WINDOW)
    progress = ProgressStore(db).get(user_id)
    return build_dashboard_stats(entries, progress)


# ---------------------- PRIVACY CONTROLS ----------------------

@router.get("/user-data/export")
def export_data(db: Session = Depends(get_db), user_id: str = Depends(get_user_id)):
    return export_user_data(user_id, ProgressStore(db), MoodEntryStore(db))


@router.delete("/user-data", response_model=UserDataClearOut)
def clear_data(db: Session = Depends(get_db), user_id: str = Depends(get_user_id)):
    return clear_user_data(user_id, ProgressStore(db), MoodEntryStore(db))


@router.post("/user-data/import", response_model=UserDataImportOut)
def import_data(payload: Any = Body(...), db: Session = Depends(get_db), user_id: str = Depends(get_user_id)):
    return import_user_data(user_id, payload, ProgressStore(db), MoodEntryStore(db))
