# Copyright (c) 2025 The MoodGarden Authors
# This file is part of the MoodGarden - Your Wellness Garden project.
# Licensed under the MIT License - see the LICENSE file for details.


import logging

from pydantic import ValidationError as PydanticValidationError

from moodgarden.schemas.mood_schemas import MoodEntryOut
from moodgarden.schemas.progress_schemas import UserDataImport, UserProgressOut
from moodgarden.stores.mood_entry_store import MoodEntryStore
from moodgarden.stores.progress_store import ProgressStore
from moodgarden.utils.errors import StorageError, ValidationError
from moodgarden.utils.time_utils import as_naive_utc, utc_now
from moodgarden.utils.user_locks import user_lock

logger = logging.getLogger(__name__)

EXPORT_VERSION = 1
EXPORT_ENTRY_LIMIT = 10_000


def export_user_data(user_id: str, progress_store: ProgressStore, entry_store: MoodEntryStore) -> dict:
    """Backup of one user's progress and check-ins, in the API's JSON shape."""
    progress = progress_store.get(user_id)
    entries = entry_store.list_recent(user_id, limit=EXPORT_ENTRY_LIMIT)

    return {
        "version": EXPORT_VERSION,
        "exportedAt": utc_now().isoformat(),
        "userId": user_id,
        "userProgress": UserProgressOut.model_validate(progress).model_dump(mode="json", by_alias=True) if progress else None,
        "moodEntries": [
            MoodEntryOut.model_validate(e).model_dump(mode="json", by_alias=True) for e in entries
        ],
    }


def clear_user_data(user_id: str, progress_store: ProgressStore, entry_store: MoodEntryStore) -> dict:
    """Deletes the user's check-ins and progress row in one commit."""
    with user_lock(user_id):
        try:
            deleted_entries = entry_store.delete_for_user(user_id)
            progress_deleted = progress_store.delete(user_id)
            progress_store.commit()
        except StorageError:
            progress_store.rollback()
            logger.exception(f"❌ Failed to clear data for {user_id}")
            raise

    logger.info(f"🧹 Cleared {deleted_entries} entries for {user_id}")
    return {"userId": user_id, "moodEntriesDeleted": deleted_entries, "progressReset": progress_deleted}


def import_user_data(user_id: str, payload: dict, progress_store: ProgressStore,
                     entry_store: MoodEntryStore) -> dict:
    """
    Restores a backup produced by `export_user_data`. The user's current
    check-ins and progress are replaced in one commit; ids are reassigned.
    """
    try:
        backup = UserDataImport.model_validate(payload)
    except PydanticValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc']) or 'backup'}: {err['msg']}" for err in e.errors()[:3]
        )
        raise ValidationError(f"Invalid backup: {problems}") from e
    if backup.version != EXPORT_VERSION:
        raise ValidationError(f"Unsupported backup version {backup.version}")

    # Oldest first so restored ids follow the timeline
    entries = sorted(backup.mood_entries, key=lambda e: as_naive_utc(e.timestamp))

    with user_lock(user_id):
        try:
            entry_store.delete_for_user(user_id)
            progress_store.delete(user_id)

            for item in entries:
                entry_store.create(
                    user_id,
                    item.mood.value,
                    item.journal,
                    item.ai_prompt,
                    timestamp=as_naive_utc(item.timestamp),
                    prompt_completed=item.prompt_completed,
                )

            restored = backup.user_progress
            if restored is not None:
                progress = progress_store.get_or_create(user_id)
                progress.streak_count = restored.streak_count
                progress.last_check_in = as_naive_utc(restored.last_check_in) if restored.last_check_in else None
                progress.longest_streak = restored.longest_streak
                progress.garden_items = restored.garden_items.model_dump()
                progress.achievements = list(restored.achievements)
                progress.quests_completed = restored.quests_completed
                progress.milestones = list(restored.milestones)
                progress_store.save(progress)

            progress_store.commit()
        except StorageError:
            progress_store.rollback()
            logger.exception(f"❌ Failed to import data for {user_id}")
            raise

    logger.info(f"📥 Imported {len(entries)} entries for {user_id}")
    return {
        "userId": user_id,
        "moodEntriesImported": len(entries),
        "progressRestored": backup.user_progress is not None,
    }
