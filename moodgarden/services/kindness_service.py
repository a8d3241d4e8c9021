# Copyright (c) 2025 The MoodGarden Authors
# This file is part of the MoodGarden - Your Wellness Garden project.
# Licensed under the MIT License - see the LICENSE file for details.


import logging
from typing import Optional

from moodgarden.models.kindness_message import KindnessMessage, MAX_MESSAGE_LENGTH
from moodgarden.services.wellness_prompt_service import WellnessPromptGenerator
from moodgarden.stores.kindness_message_store import KindnessMessageStore
from moodgarden.utils.errors import StorageError, ValidationError
from moodgarden.utils.prompt_templates import LAST_RESORT_KINDNESS_MESSAGE
from moodgarden.utils.user_locks import kindness_lock

logger = logging.getLogger(__name__)


class KindnessExchange:
    def __init__(self, store: KindnessMessageStore, generator: WellnessPromptGenerator):
        self.store = store
        self.generator = generator

    def submit_message(self, text: str) -> KindnessMessage:
        message = (text or "").strip()
        if not message:
            raise ValidationError("Message cannot be empty")
        if len(message) > MAX_MESSAGE_LENGTH:
            raise ValidationError(f"Message must be at most {MAX_MESSAGE_LENGTH} characters")

        try:
            record = self.store.create(message, is_ai_generated=False)
            self.store.commit()
        except StorageError:
            self.store.rollback()
            logger.exception("❌ Failed to store kindness message")
            raise

        logger.info(f"💌 Kindness message #{record.id} shared")
        return record

    def _store_generated(self, text: str) -> KindnessMessage:
        try:
            return self.store.create(text, is_ai_generated=True)
        except StorageError as e:
            logger.warning(f"⚠️ Could not store generated message, using last resort: {e}")
            self.store.rollback()
            return self.store.create(LAST_RESORT_KINDNESS_MESSAGE, is_ai_generated=False)

    def _hand_out(self, generated_text: Optional[str] = None) -> Optional[KindnessMessage]:
        with kindness_lock:
            try:
                record = self.store.find_unused()
                if record is None:
                    if generated_text is None:
                        return None
                    record = self._store_generated(generated_text)
                self.store.mark_used(record)
                self.store.commit()
            except StorageError:
                self.store.rollback()
                logger.exception("❌ Failed to fetch kindness message")
                raise
        return record

    def get_random_message(self) -> KindnessMessage:
        """
        Hands out an unused message exactly once. When the pool is empty a
        generated message is stored and handed out instead.
        """
        record = self._hand_out()
        if record is None:
            # The AI call runs outside the lock; a message shared meanwhile wins
            text = self.generator.generate_support_message()
            record = self._hand_out(text)
        return record
