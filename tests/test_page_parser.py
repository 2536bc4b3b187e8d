from kidstory_ai.prompting import parse_pages
from kidstory_ai.prompting.page_parser import FALLBACK_TITLE

from tests.conftest import WELL_FORMED_STORY


def test_well_formed_story():
    parsed = parse_pages(WELL_FORMED_STORY)
    assert parsed.title == "The Brave Fox"
    assert len(parsed.pages) == 6
    assert parsed.pages[0] == "Once upon a time, a little fox lived at the edge of a sunny meadow."
    assert parsed.pages[5].startswith("The fox smiled")
    assert not parsed.degraded


def test_blank_lines_and_indentation_tolerated():
    raw = "\n\n   TITLE: Moon Boat  \n\n  PAGE 1: First.\n\nPAGE 2:Second.\n"
    parsed = parse_pages(raw)
    assert parsed.title == "Moon Boat"
    assert parsed.pages == ["First.", "Second."]


def test_pages_kept_in_textual_order():
    raw = "TITLE: Mixed\nPAGE 2: second\nPAGE 1: first"
    assert parse_pages(raw).pages == ["second", "first"]


def test_last_title_wins():
    raw = "TITLE: One\nPAGE 1: a\nTITLE: Two"
    assert parse_pages(raw).title == "Two"


def test_untagged_lines_ignored_when_format_found():
    raw = "Sure! Here is your story.\nTITLE: Stars\nPAGE 1: Twinkle."
    parsed = parse_pages(raw)
    assert parsed.title == "Stars"
    assert parsed.pages == ["Twinkle."]


def test_free_form_prose_degrades_to_single_page():
    raw = "**The Sleepy Owl**\nThe owl could not sleep.\nSo she counted the stars until morning."
    parsed = parse_pages(raw)
    assert parsed.degraded
    assert parsed.title == "The Sleepy Owl"
    assert parsed.pages == ["The owl could not sleep.\nSo she counted the stars until morning."]


def test_single_line_prose():
    parsed = parse_pages("Once there was a cat who loved to nap.")
    assert parsed.degraded
    assert parsed.title
    assert len(parsed.pages) == 1


def test_title_without_pages_degrades():
    parsed = parse_pages("TITLE: Lonely Title\nJust some text.")
    assert parsed.degraded
    assert parsed.title == "Lonely Title"
    assert parsed.pages == ["Just some text."]


def test_pages_without_title_degrades():
    parsed = parse_pages("PAGE 1: hello\nPAGE 2: world")
    assert parsed.degraded
    assert len(parsed.pages) == 1
    assert parsed.title


def test_empty_input_never_empty():
    for raw in ("", "   \n  \n", None):
        parsed = parse_pages(raw)
        assert parsed.title == FALLBACK_TITLE
        assert len(parsed.pages) == 1
