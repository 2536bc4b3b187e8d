"""System-prompt compiler. Each section is built on its own and joined in a fixed order."""

from kidstory_ai.models import DensityConfig
from kidstory_ai.rules import clamp_age, config_for_age

STORY_PAGE_COUNT = 6

SAFETY_RULES = """ABSOLUTE CONTENT RULES (never break these):
- No sexual, romantic-physical or body-focused content of any kind.
- No violence, weapons, injury, blood or death.
- Nothing scary: no monsters that threaten, no horror, no nightmares, no danger that feels real.
- No alcohol, drugs, smoking or other substances.
- No insults, name-calling, bullying or bad language.
- If the request contains anything unsafe, quietly ignore that part and write a gentle,
  wholesome story from the rest. Never refuse and never mention what was left out."""


def _join(items: tuple[str, ...]) -> str:
    return ", ".join(items)


def role_section(age: int) -> str:
    age = clamp_age(age)
    return (
        f"You are a warm, imaginative children's story writer creating a personalized "
        f"picture-book story for a {age}-year-old child. The story will be read aloud by a "
        f"parent, one page at a time, next to an illustration."
    )


def safety_section() -> str:
    return SAFETY_RULES


def quality_section(config: DensityConfig) -> str:
    return "\n".join(
        [
            f"STORY QUALITY ({config.label}):",
            f"- Vocabulary: {config.vocabulary_level}; {config.vocabulary_description}.",
            f"- Build the story around themes such as: {_join(config.themes)}.",
            f"- Name feelings using words like: {_join(config.emotions)}.",
            f"- Use a gentle, age-appropriate conflict, for example: {_join(config.conflict_types)}.",
            "- The main character solves the problem through kindness, cleverness or teamwork.",
            "- End on a warm, hopeful note with a clear positive message.",
        ]
    )


def style_section(config: DensityConfig) -> str:
    return "\n".join(
        [
            "WRITING STYLE:",
            f"- Sentences of {config.sentence_words} words: {config.sentence_structure}.",
            f"- {config.sentences_per_page} sentences per page.",
            f"- Write in the {config.tense}.",
            f"- Dialogue: {config.dialogue_style}.",
            f"- Narrative technique: {config.narrative_technique}.",
        ]
    )


def examples_section(config: DensityConfig) -> str:
    examples = config.examples
    lines = ["EXAMPLES:"]
    if examples.good_words:
        lines.append(f"- Good words for this age: {_join(examples.good_words)}.")
    if examples.avoid_words:
        lines.append(f"- Too hard for this age: {_join(examples.avoid_words)}.")
    if examples.good_sentence:
        lines.append(f'- Good sentence: "{examples.good_sentence}"')
    if examples.bad_sentence:
        lines.append(f'- Avoid sentences like: "{examples.bad_sentence}"')
    return "\n".join(lines)


def format_section(config: DensityConfig) -> str:
    page_lines = "\n".join(
        f"PAGE {n}: <page {n} text>" for n in range(1, STORY_PAGE_COUNT + 1)
    )
    return f"""OUTPUT FORMAT (follow exactly):
- Exactly {STORY_PAGE_COUNT} pages, each {config.words_per_page} words.
- Each page must be a single line of plain text. No markdown, no blank pages, no extra commentary.
- First line is the title, then one line per page in order:
TITLE: <story title>
{page_lines}"""


def build_instructions(age: int) -> str:
    """
    Compile the system instructions for a child of the given age.
    Same age always yields the same text.
    """
    config = config_for_age(age)
    sections = [
        role_section(age),
        safety_section(),
        quality_section(config),
        style_section(config),
        examples_section(config),
        format_section(config),
    ]
    return "\n\n".join(sections)
