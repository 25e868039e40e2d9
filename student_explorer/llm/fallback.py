from __future__ import annotations

import random

PREFIXES = (
    "✨ ",
    "🎓 Perfect pentru studenți! ",
    "🌟 ",
    "💫 ",
)
VIBE_WORDS = ("vibe-ul", "atmosfera", "energia", "experiența")


def enhance_description(description: str, rng: random.Random | None = None) -> str:
    """Decorate a description locally. Always contains ``description``."""
    rng = rng or random
    prefix = rng.choice(PREFIXES)
    vibe = rng.choice(VIBE_WORDS)
    return f"{prefix}{description} {vibe[:1].upper()}{vibe[1:]} de aici este incredibilă! 🚀"
