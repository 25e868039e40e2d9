from __future__ import annotations

import logging

from groq import AsyncGroq

from .config import DEFAULT_LLM_CONFIG, LLMConfig
from .fallback import enhance_description

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are a marketing expert for student tourism venues. "
    "Write creative, enthusiastic descriptions that appeal to students, "
    "in Romanian, keeping the essential facts of the original text but "
    "adding a positive, energetic vibe. "
    "Reply with the new description only."
)


def _build_user_message(description: str) -> str:
    return (
        "Rewrite the following description in a more creative and "
        f"attractive way for students: {description}"
    )


async def generate_vibe(
    description: str,
    config: LLMConfig = DEFAULT_LLM_CONFIG,
) -> str:
    """
    Ask Groq for a livelier version of a location description.

    Without an API key (or with the LLM disabled) no request is made and the
    local decorated description is returned. Any failure or empty answer
    falls back the same way, so this never raises.
    """
    if not config.enabled or not config.api_key:
        return enhance_description(description)

    try:
        client = AsyncGroq(api_key=config.api_key, timeout=config.timeout)
        response = await client.chat.completions.create(
            model=config.model,
            messages=[
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": _build_user_message(description)},
            ],
            max_tokens=config.max_tokens,
            temperature=config.temperature,
        )
        content = (response.choices[0].message.content or "").strip()
        if content:
            return content
        logger.warning("Groq returned an empty description, using local enhancement")

    except Exception:
        logger.warning("Groq LLM call failed, falling back to local enhancement", exc_info=True)

    return enhance_description(description)
