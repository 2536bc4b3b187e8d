"""Prompt sanitizer - the single safety gate before any prompt leaves the process.

Unsafe terms are deleted, not rejected. When too little is left the whole
prompt is replaced with a wholesome default.
"""

import logging
import re

logger = logging.getLogger(__name__)

SAFE_DEFAULT_PROMPT = "a magical adventure with friendship and kindness"
MIN_PROMPT_LENGTH = 5

# Category -> whole-word patterns. Matched case-insensitively.
UNSAFE_PATTERNS: dict[str, tuple[str, ...]] = {
    "sexual": (
        r"sex(?:y|ual|ually)?",
        r"nude|nudity|naked",
        r"porn\w*",
        r"erotic\w*",
        r"strip(?:per|ping|tease)",
        r"boobs?|breasts?",
    ),
    "violence": (
        r"kill(?:s|ed|er|ers|ing)?",
        r"murder\w*",
        r"blood(?:y|ied)?",
        r"dead|death|deaths|die|dies|died|dying",
        r"stab(?:s|bed|bing)?",
        r"shoot(?:s|ing)?|shot",
        r"suicide",
        r"violen(?:t|ce)",
        r"gore|gory",
        r"behead\w*|decapitat\w*",
        r"war(?:s|fare)?",
    ),
    "abuse": (
        r"abus(?:e|ed|es|ing|ive)",
        r"tortur(?:e|ed|es|ing)",
        r"kidnap\w*",
        r"bully(?:ing)?|bullied",
        r"slap(?:s|ped|ping)?",
    ),
    "substances": (
        r"drugs?|drugged",
        r"alcohol\w*|drunk",
        r"beers?|wine|vodka|whiskey|liquor",
        r"cigarettes?|cigars?|smok(?:e|es|ed|ing)",
        r"weed|marijuana|cocaine|heroin",
    ),
    "weapons": (
        r"guns?|pistols?|rifles?|shotguns?",
        r"knife|knives",
        r"bombs?|grenades?|explosives?",
        r"weapons?|swords?|axes?",
    ),
    "fear": (
        r"horror|horrifying",
        r"terrif(?:ying|ied)",
        r"nightmares?",
        r"demons?|devils?",
        r"zombies?",
        r"creepy|scary",
        r"haunted",
    ),
    "profanity": (
        r"damn\w*",
        r"hell",
        r"shit\w*",
        r"fuck\w*",
        r"bitch\w*",
        r"bastards?",
        r"stupid|idiots?|dumb",
        r"shut up",
    ),
}

_COMPILED: tuple[tuple[str, re.Pattern[str]], ...] = tuple(
    (category, re.compile(rf"\b(?:{pattern})\b", re.IGNORECASE))
    for category, patterns in UNSAFE_PATTERNS.items()
    for pattern in patterns
)
_WHITESPACE = re.compile(r"\s+")
_NON_WORD = re.compile(r"\W+")


def _normalize(text: str) -> str:
    return _WHITESPACE.sub(" ", text).strip()


def _strip_unsafe(text: str) -> tuple[str, set[str]]:
    hits: set[str] = set()
    for category, pattern in _COMPILED:
        text, count = pattern.subn("", text)
        if count:
            hits.add(category)
    return _normalize(text), hits


def sanitize(raw: str) -> str:
    """
    Remove unsafe terms from a user prompt.
    Returns SAFE_DEFAULT_PROMPT when fewer than MIN_PROMPT_LENGTH word characters survive.
    """
    text = _normalize(raw or "")
    categories: set[str] = set()
    # Removal can bring words of a multi-word pattern together; repeat to a fixpoint.
    while True:
        cleaned, hits = _strip_unsafe(text)
        categories |= hits
        if cleaned == text:
            break
        text = cleaned

    if categories:
        logger.info("Removed unsafe prompt content: categories=%s", sorted(categories))

    if len(_NON_WORD.sub("", text)) < MIN_PROMPT_LENGTH:
        logger.info("Prompt too short after sanitizing, using safe default")
        return SAFE_DEFAULT_PROMPT
    return text
