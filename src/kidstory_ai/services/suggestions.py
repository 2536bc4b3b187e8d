"""Ready-made story prompts offered to parents who need an idea."""

import random

PROMPT_SUGGESTIONS = (
    "Tell a magical story about a brave little explorer who discovers a secret garden where flowers sing and dance.",
    "Create an adventure where a friendly little dragon learns that being different makes him truly special.",
    "Write a bedtime story about a tiny cloud who floats down from the sky to grant wishes to sleeping children.",
    "Tell a tale about a curious penguin who sets sail on a ship made of ice to find the land of eternal sunshine.",
    "Create a story where a small bunny discovers a hidden door in the forest that leads to a world made of candy.",
    "Write about a little star who falls from the sky and goes on a journey to find its way back home.",
    "Tell a story about a playful kitten who finds a magical paintbrush that brings her drawings to life.",
    "Create an adventure where a brave little fish swims through an underwater kingdom to save the coral reef.",
)


def random_suggestion(exclude: str | None = None, rng: random.Random | None = None) -> str:
    """Pick a suggestion, never repeating `exclude` when there is an alternative."""
    rng = rng or random.Random()
    choices = [p for p in PROMPT_SUGGESTIONS if p != exclude] or list(PROMPT_SUGGESTIONS)
    return rng.choice(choices)
