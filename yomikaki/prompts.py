"""Prompts used for AI operations in the yomikaki package."""

from typing import Dict

# Language-specific system prompts for AI models
LANGUAGE_SYSTEM_PROMPTS: Dict[str, str] = {
    'ja': "You are a Japanese input method assistant. You turn romanized or English input into the Japanese word a learner most likely meant.",
}


def get_system_instruction(language: str) -> str:
    if language not in LANGUAGE_SYSTEM_PROMPTS:
        raise ValueError(f"Unsupported language: {language}")
    return LANGUAGE_SYSTEM_PROMPTS[language]


def kanji_suggestion_prompt(text: str) -> str:
    return f"""
        Convert the English/Romaji text "{text}" to the most likely Japanese Word (Kanji/Kana).

        # Constraints
        - Return strictly just the word as a string. No explanation.
        - Do not use quotes, markdown formatting or code blocks.
    """
