# Copyright (c) 2025 The MoodGarden Authors
# This file is part of the MoodGarden - Your Wellness Garden project.
# Licensed under the MIT License - see the LICENSE file for details.


from typing import Optional

# -------------------------
# Wellness prompt
# -------------------------

def wellness_prompt(mood: str, journal: Optional[str] = None) -> str:
    context = f'The user also shared: "{journal.strip()}"' if journal and journal.strip() else ""
    return f"""
You are a compassionate wellness coach. A user has checked in with their mood as "{mood}". {context}

Based on their current emotional state, write a single, personalized wellness prompt that:
- Acknowledges how they feel
- Offers one specific, actionable suggestion or reflection question
- Is brief (1–2 sentences maximum)
- Focuses on self-care, mindfulness, or emotional wellness

Examples of good prompts:
- For happy mood: "Take a moment to savor this positive feeling. What three things contributed to your happiness today?"
- For sad mood: "It's okay to feel sad. Try writing down one small thing you're grateful for right now."
- For anxious mood: "When anxiety visits, remember that your breath is always available as an anchor. Try taking five deep, slow breaths."

Respond with just the wellness prompt, no additional text.
"""

FALLBACK_WELLNESS_PROMPTS = {
    "happy": "Take a moment to appreciate this positive feeling. What can you do to share this joy with others?",
    "good": "You're feeling good today! Consider setting a small, meaningful intention for the rest of your day.",
    "neutral": "Sometimes neutral is exactly where we need to be. What's one small thing that could bring a spark to your day?",
    "sad": "It's okay to feel sad. Your emotions are valid. Try reaching out to someone you trust or doing one gentle thing for yourself.",
    "anxious": "When anxiety feels overwhelming, remember that this feeling will pass. Focus on what you can control in this moment.",
}

GENERIC_WELLNESS_PROMPT = "Take a deep breath and be gentle with yourself. You're doing better than you think."

# -------------------------
# Kindness exchange
# -------------------------

def support_message_prompt() -> str:
    return """
Write a short, uplifting, anonymous message of support for someone who might be going through a difficult time.

The message should be:
- Encouraging and compassionate
- Universal (not about any particular situation)
- Brief (1–2 sentences)
- Appropriate for all audiences, with a supportive emoji if it fits

Examples:
- "You're stronger than you know, and braver than you feel. Tomorrow is a new day full of possibilities. 💙"
- "Remember that storms don't last forever. You've weathered difficult times before, and you'll make it through this too. ✨"

Respond with just the supportive message, no additional text.
"""

FALLBACK_SUPPORT_MESSAGES = [
    "You're doing better than you think. Every small step forward matters. 💜",
    "Remember that you are worthy of love and kindness, especially from yourself. 🌸",
    "This too shall pass. You have the strength to get through whatever you're facing. ✨",
    "Your story isn't over yet. There are still beautiful chapters to be written. 🌟",
    "Be gentle with yourself today. You're exactly where you need to be. 💙",
]

# Served when even storing a generated message fails
LAST_RESORT_KINDNESS_MESSAGE = "You're doing better than you think. Every small step matters. 💙"
