# Copyright (c) 2025 The MoodGarden Authors
# This file is part of the MoodGarden - Your Wellness Garden project.
# Licensed under the MIT License - see the LICENSE file for details.


import logging
import random
from typing import Callable, Optional

from moodgarden.utils.ai_engine import generate_ai_reply
from moodgarden.utils.errors import ExternalServiceError
from moodgarden.utils.prompt_templates import (
    FALLBACK_SUPPORT_MESSAGES,
    FALLBACK_WELLNESS_PROMPTS,
    GENERIC_WELLNESS_PROMPT,
    support_message_prompt,
    wellness_prompt,
)

logger = logging.getLogger(__name__)


class WellnessPromptGenerator:
    """
    Turns a mood (and optional journal text) into a short suggestion.
    `text_fn` is any callable prompt -> text; it may raise. Failures are
    logged and replaced by canned text, so callers always get a string.
    """

    def __init__(self, text_fn: Callable[[str], str] = generate_ai_reply, rng: Optional[random.Random] = None):
        self.text_fn = text_fn
        self.rng = rng or random.Random()

    def _ask(self, prompt: str) -> Optional[str]:
        try:
            reply = self.text_fn(prompt)
        except ExternalServiceError as e:
            logger.warning(f"⚠️ AI generation failed, using fallback: {e}")
            return None
        except Exception:
            logger.exception("❌ Unexpected error from AI text function, using fallback")
            return None

        if not reply or not reply.strip():
            logger.warning("⚠️ Empty AI response, using fallback")
            return None
        return reply.strip()

    def generate(self, mood: str, journal: Optional[str] = None) -> str:
        reply = self._ask(wellness_prompt(mood, journal))
        if reply:
            return reply
        return FALLBACK_WELLNESS_PROMPTS.get(mood, GENERIC_WELLNESS_PROMPT)

    def generate_support_message(self) -> str:
        reply = self._ask(support_message_prompt())
        if reply:
            return reply
        return self.rng.choice(FALLBACK_SUPPORT_MESSAGES)


def get_prompt_generator() -> WellnessPromptGenerator:
    """FastAPI dependency; tests override it with a stub text function."""
    return WellnessPromptGenerator()
