# Copyright (c) 2025 The MoodGarden Authors
# This file is part of the MoodGarden - Your Wellness Garden project.
# Licensed under the MIT License - see the LICENSE file for details.

import os
import logging
import requests

from moodgarden.utils.errors import ExternalServiceError

# ---------------------------
# ✅ Logger Setup
# ---------------------------

logger = logging.getLogger(__name__)
logging.basicConfig(level=logging.INFO)

# ---------------------------
# ✅ Environment Variables
# ---------------------------

if os.getenv("ENV") != "production":
    from dotenv import load_dotenv
    load_dotenv()

HF_TOKEN = os.getenv("HUGGINGFACE_TOKEN")
SPACE_URL = os.getenv("LLM_SPACE_URL", "")
AI_TIMEOUT_SECONDS = float(os.getenv("AI_TIMEOUT_SECONDS", "10"))

# ---------------------------
# ✅ Headers
# ---------------------------

HEADERS = {"Content-Type": "application/json"}
if HF_TOKEN:
    HEADERS["Authorization"] = f"Bearer {HF_TOKEN}"


def is_configured() -> bool:
    return bool(SPACE_URL)


# ---------------------------
# ✅ Hugging Face Space Function
# ---------------------------

def get_space_reply(prompt: str, timeout: float = AI_TIMEOUT_SECONDS) -> str:
    """
    Send a prompt to the configured Hugging Face Space and return the
    generated text. One attempt with a bounded timeout; every failure
    (missing URL, transport error, bad status, odd payload, empty text)
    raises ExternalServiceError so callers can fall back.
    """

    if not SPACE_URL:
        raise ExternalServiceError("LLM_SPACE_URL is not configured")

    try:
        logger.info(f"🔁 Sending prompt to Hugging Face Space: {SPACE_URL}")
        response = requests.post(
            SPACE_URL,
            headers=HEADERS,
            json={"data": [prompt]},
            timeout=timeout
        )
        response.raise_for_status()
        result = response.json()
    except requests.exceptions.RequestException as e:
        raise ExternalServiceError(f"Space API request failed: {e}") from e
    except ValueError as e:
        raise ExternalServiceError(f"Space API returned invalid JSON: {e}") from e

    # Parse the Space response
    if not isinstance(result, dict) or not isinstance(result.get("data"), list) or not result["data"]:
        logger.warning("⚠️ Unexpected Space response format: %s", result)
        raise ExternalServiceError("Unexpected AI response format")

    text = result["data"][0]
    if not isinstance(text, str) or not text.strip():
        raise ExternalServiceError("Empty response from AI")

    return text.strip()
