"""Tests for status-row modes and search text editing."""

import random

import pytest

from kom.command_line import CommandLine, End, Filename, InvalidModeError, Normal, Search


def test_starts_with_filename_banner_when_named():
    cl = CommandLine("notes.txt")
    assert cl.mode == Filename("notes.txt")
    assert cl.status_text() == "notes.txt"
    assert cl.is_banner


def test_starts_normal_without_name():
    cl = CommandLine()
    assert cl.mode == Normal()
    assert cl.status_text() == ":"
    assert cl.cursor_column() == 1
    assert not cl.is_banner


def test_end_banner():
    cl = CommandLine()
    cl.show_end()
    assert cl.mode == End()
    assert cl.status_text() == "(END)"
    assert cl.is_banner


def test_collapse_banner():
    cl = CommandLine("a.txt")
    cl.collapse_banner()
    assert cl.mode == Normal()
    cl.show_end()
    cl.collapse_banner()
    assert cl.mode == Normal()


def test_collapse_and_end_leave_search_alone():
    cl = CommandLine()
    search = cl.switch_to_search()
    search.push_char("x")
    cl.collapse_banner()
    cl.show_end()
    assert cl.mode is search
    assert cl.status_text() == "/x"


def test_switch_to_search_and_back():
    cl = CommandLine("a.txt")
    search = cl.switch_to_search()
    assert cl.is_searching
    assert cl.search is search
    assert cl.status_text() == "/"
    cl.switch_to_normal()
    assert cl.mode == Normal()
    assert not cl.is_searching


def test_search_handle_outside_search_mode_raises():
    cl = CommandLine()
    with pytest.raises(InvalidModeError):
        cl.search


def test_new_search_starts_empty():
    cl = CommandLine()
    cl.switch_to_search().push_char("a")
    cl.switch_to_normal()
    assert cl.switch_to_search() == Search("", 0)


def test_type_left_backspace():
    cl = CommandLine()
    search = cl.switch_to_search()
    search.push_char("a")
    search.push_char("b")
    search.cursor_left()
    search.erase_char()
    assert search.text == "b"
    assert search.cursor == 0


def test_push_char_inserts_at_cursor():
    search = Search()
    for ch in "ac":
        search.push_char(ch)
    search.cursor_left()
    search.push_char("b")
    assert search.text == "abc"
    assert search.cursor == 2


def test_erase_at_start_is_noop():
    search = Search("abc", 0)
    assert search.erase_char() is False
    assert search.text == "abc"
    assert search.cursor == 0


def test_delete_char():
    search = Search("abc", 1)
    assert search.delete_char() is True
    assert search.text == "ac"
    assert search.cursor == 1


def test_delete_at_end_is_noop():
    search = Search("abc", 3)
    assert search.delete_char() is False
    assert search.text == "abc"


def test_cursor_moves_saturate():
    search = Search("ab", 0)
    assert search.cursor_left() is False
    assert search.cursor_right() is True
    assert search.cursor_right() is True
    assert search.cursor_right() is False
    assert search.cursor == 2


def test_search_cursor_column_follows_cursor():
    cl = CommandLine()
    search = cl.switch_to_search()
    search.push_char("a")
    search.push_char("b")
    assert cl.cursor_column() == 3
    search.cursor_left()
    assert cl.cursor_column() == 2


def test_cursor_stays_in_bounds_for_random_edits():
    rng = random.Random(1234)
    operations = [
        lambda s: s.push_char(rng.choice("xyz")),
        lambda s: s.erase_char(),
        lambda s: s.delete_char(),
        lambda s: s.cursor_left(),
        lambda s: s.cursor_right(),
    ]
    search = Search()
    for _ in range(500):
        rng.choice(operations)(search)
        assert 0 <= search.cursor <= len(search.text)
