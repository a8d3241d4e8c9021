# Copyright (c) 2025 The MoodGarden Authors
# This file is part of the MoodGarden - Your Wellness Garden project.
# Licensed under the MIT License - see the LICENSE file for details.


from moodgarden.services.llm_space_service import get_space_reply


def generate_ai_reply(prompt: str) -> str:
    """
    Wrapper function to generate an AI reply from a given prompt.
    Keeps app logic clean and abstracted from the model implementation.
    May raise ExternalServiceError.
    """
    return get_space_reply(prompt)
