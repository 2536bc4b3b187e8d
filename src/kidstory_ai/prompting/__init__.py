"""Prompt compilation and provider output parsing."""

from kidstory_ai.prompting.instructions import STORY_PAGE_COUNT, build_instructions
from kidstory_ai.prompting.page_parser import parse_pages

__all__ = ["STORY_PAGE_COUNT", "build_instructions", "parse_pages"]
