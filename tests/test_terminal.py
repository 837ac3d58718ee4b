"""Tests for screen drawing and terminal session handling."""

import contextlib

import pytest

from kom.terminal import TerminalInterface, printable


class FakeTerm:
    """Minimal blessed.Terminal stand-in that renders capabilities as tags."""

    home = '<home>'
    clear = '<clear>'
    clear_eol = '<el>'
    reverse = '<rev>'
    normal = '<norm>'
    normal_cursor = '<cur>'
    enter_fullscreen = '<fs>'
    exit_fullscreen = '</fs>'

    def __init__(self, width=20, height=4):
        self.width = width
        self.height = height
        self.calls = []
        self.keys = []

    def move_yx(self, y, x):
        return f'<{y},{x}>'

    def truncate(self, text, width):
        self.calls.append(('truncate', width))
        return text[:width]

    @contextlib.contextmanager
    def raw(self):
        self.calls.append('raw')
        try:
            yield
        finally:
            self.calls.append('/raw')

    @contextlib.contextmanager
    def mouse_enabled(self, timeout=None):
        self.calls.append(('mouse', timeout))
        try:
            yield
        finally:
            self.calls.append('/mouse')

    def inkey(self, timeout=None, esc_delay=None):
        self.calls.append(('inkey', timeout))
        return self.keys.pop(0) if self.keys else ''


@pytest.fixture
def term():
    return FakeTerm()


def test_geometry_is_read_once(term):
    ti = TerminalInterface(term)
    term.width = 100
    term.height = 50
    assert ti.width == 20
    assert ti.height == 4


def test_draw_screen_writes_rows_then_status(term, capsys):
    ti = TerminalInterface(term)
    ti.draw_screen(["first", "second"], ":", 1)
    out = capsys.readouterr().out
    assert out == (
        '<home>'
        '<0,0><el>first'
        '<1,0><el>second'
        '<2,0><el>'
        '<3,0><el>:'
        '<3,1><cur>'
    )


def test_draw_screen_highlights_banner(term, capsys):
    ti = TerminalInterface(term)
    ti.draw_screen(["a", "b", "c"], "(END)", 5, highlight=True)
    out = capsys.readouterr().out
    assert out.endswith('<3,0><el><rev>(END)<norm><3,5><cur>')


def test_draw_screen_truncates_status_to_width(capsys):
    term = FakeTerm(width=5, height=2)
    ti = TerminalInterface(term)
    ti.draw_screen(["x"], "/abcdefgh", 9)
    out = capsys.readouterr().out
    assert '<1,0><el>/abcd<1,4><cur>' in out


def test_primitives(term, capsys):
    ti = TerminalInterface(term)
    ti.move_cursor(2, 3)
    ti.clear_row(1)
    ti.write_row(0, "text")
    assert capsys.readouterr().out == '<2,3><1,0><el><0,0><el>text'


def test_setup_and_cleanup(term, capsys):
    ti = TerminalInterface(term)
    ti.setup()
    assert ti.is_fullscreen
    ti.cleanup()
    assert not ti.is_fullscreen
    # A second cleanup is harmless
    ti.cleanup()
    assert capsys.readouterr().out == '<fs><clear><cur></fs>'


def test_session_with_mouse(term, capsys):
    ti = TerminalInterface(term)
    with ti.session(mouse=True, mouse_query_timeout=0.5):
        assert ti.is_fullscreen
    assert term.calls == ['raw', ('mouse', 0.5), '/mouse', '/raw']
    assert not ti.is_fullscreen


def test_session_without_mouse(term, capsys):
    ti = TerminalInterface(term)
    with ti.session(mouse=False):
        pass
    assert term.calls == ['raw', '/raw']


def test_session_restores_terminal_on_error(term, capsys):
    ti = TerminalInterface(term)
    with pytest.raises(OSError):
        with ti.session():
            raise OSError("read failed")
    assert not ti.is_fullscreen
    assert capsys.readouterr().out.endswith('</fs>')


def test_get_key_blocks_by_default(term):
    term.keys.append('j')
    ti = TerminalInterface(term)
    assert ti.get_key() == 'j'
    assert term.calls == [('inkey', None)]


def test_printable_replaces_control_characters():
    assert printable("plain text") == "plain text"
    assert printable("a\tb") == "a b"
    assert printable("\x1b[2J") == "␛[2J"
    assert printable("bell\x07") == "bell␇"
    assert printable("del\x7f") == "del␡"
    assert printable("csi\x9b") == "csi�"
    assert printable("\x00") == "␀"


def test_draw_screen_sanitizes_and_clips_rows(term, capsys):
    ti = TerminalInterface(term)
    ti.draw_screen(["\x1b[31mred\ttext that is too long"], ":", 1)
    out = capsys.readouterr().out
    assert '\x1b' not in out
    assert '<0,0><el>␛[31mred text that i<1,0>' in out
    assert ('truncate', 20) in term.calls
