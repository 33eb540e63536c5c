import os
import termios
import time

import pytest

from forca.keyboard import Keyboard


@pytest.fixture
def pty_pair():
    master, slave = os.openpty()
    yield master, slave
    os.close(master)
    os.close(slave)


def wait_for_key(kb, timeout=2.0):
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if kb.keyhit():
            return True
        time.sleep(0.01)
    return False


def test_keyhit_sees_single_key_without_newline(pty_pair):
    master, slave = pty_pair
    with Keyboard(slave) as kb:
        os.write(master, b"a")
        assert wait_for_key(kb) is True
        assert kb.readch() == ord("a")


def test_keyhit_false_when_nothing_waiting(pty_pair):
    _, slave = pty_pair
    with Keyboard(slave) as kb:
        assert kb.keyhit() is False


def test_peeked_key_is_kept_until_read(pty_pair):
    master, slave = pty_pair
    with Keyboard(slave) as kb:
        os.write(master, b"z")
        assert wait_for_key(kb) is True
        assert kb.keyhit() is True
        assert kb.readch() == ord("z")
        assert kb.keyhit() is False


def test_readch_blocks_for_next_key(pty_pair):
    master, slave = pty_pair
    with Keyboard(slave) as kb:
        os.write(master, b"y")
        assert kb.readch() == ord("y")


def test_init_disables_echo_and_canonical_mode(pty_pair):
    _, slave = pty_pair
    with Keyboard(slave):
        lflag = termios.tcgetattr(slave)[3]
        assert lflag & termios.ECHO == 0
        assert lflag & termios.ICANON == 0
        assert lflag & termios.ISIG == 0


def test_destroy_restores_settings(pty_pair):
    _, slave = pty_pair
    before = termios.tcgetattr(slave)
    with Keyboard(slave):
        assert termios.tcgetattr(slave) != before
    assert termios.tcgetattr(slave) == before


def test_init_on_non_terminal_fails():
    read_fd, write_fd = os.pipe()
    try:
        with pytest.raises(termios.error):
            Keyboard(read_fd).init()
    finally:
        os.close(read_fd)
        os.close(write_fd)


def test_keyhit_requires_init(pty_pair):
    _, slave = pty_pair
    with pytest.raises(RuntimeError):
        Keyboard(slave).keyhit()