from vermada.credits import (
    BLANK_LINE_HEIGHT,
    STOP_OFFSET,
    CreditsRoll,
    load_credits,
    parse_credits,
)
from vermada.defs import SCREEN_HEIGHT


def test_parse_sizes_and_text():
    credits = parse_credits("2 Sa Vermada\n1 Programming and art\n")
    assert [(c.size, c.text) for c in credits] == [(2, "Sa Vermada"), (1, "Programming and art")]
    assert credits[0].y == SCREEN_HEIGHT


def test_lines_follow_each_other_downwards():
    credits = parse_credits("1 a\n3 b\n1 c\n")
    ys = [c.y for c in credits]
    assert ys == sorted(ys)
    assert ys[2] - ys[1] > ys[1] - ys[0]


def test_blank_line_adds_gap():
    without = parse_credits("1 first\n1 second\n")
    with_gap = parse_credits("1 first\n\n1 second\n")
    assert with_gap[1].y - without[1].y == BLANK_LINE_HEIGHT
    assert len(with_gap) == 2


def test_single_character_line_is_a_gap():
    plain = parse_credits("1 first\n1 second\n")
    gapped = parse_credits("1 first\nx\n1 second\n")
    assert len(gapped) == 2
    assert gapped[1].y - plain[1].y == BLANK_LINE_HEIGHT


def test_line_without_size():
    credits = parse_credits("hello\n")
    assert credits[0].size == 0
    assert credits[0].text == ""


def test_missing_final_newline_keeps_last_line():
    assert [c.text for c in parse_credits("1 a\n1 b")] == ["a", "b"]


def test_skip_ends_immediately():
    roll = CreditsRoll(parse_credits("1 a\n"))
    assert roll.tick(skip_pressed=True) is True


def test_roll_stops_and_holds_then_finishes():
    roll = CreditsRoll(parse_credits("1 a\n1 b\n"))
    ticks = 0
    while not roll.tick():
        ticks += 1
        assert ticks < 10_000
    assert roll.scrolling is False
    assert roll.credits[-1].y == SCREEN_HEIGHT - STOP_OFFSET
    assert roll.timeout <= 0


def test_credits_stop_moving_once_held():
    roll = CreditsRoll(parse_credits("1 a\n"))
    while roll.scrolling:
        roll.tick()
    stopped_at = roll.credits[0].y
    roll.tick()
    assert roll.credits[0].y == stopped_at


def test_empty_roll_only_ends_on_skip():
    roll = CreditsRoll([])
    assert not any(roll.tick() for _ in range(500))
    assert roll.tick(skip_pressed=True)


def test_visible_window():
    roll = CreditsRoll(parse_credits("1 a\n"))
    assert list(roll.visible()) == []
    roll.tick()
    assert [c.text for c in roll.visible()] == ["a"]


def test_load_from_file(tmp_path):
    path = tmp_path / "credits.txt"
    path.write_text("2 Title\n\n1 Name\n", encoding="utf-8")
    assert load_credits(path) == parse_credits("2 Title\n\n1 Name\n")