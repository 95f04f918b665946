"""Shared fakes for the curses window, key source and clock."""

import curses
from typing import List, Optional, Sequence

import pytest


class FakeWindow:
    """Records what a curses window would have drawn."""

    def __init__(self, lines: int = 24, columns: int = 80, fail_on_addstr: bool = False):
        self.lines = lines
        self.columns = columns
        self.fail_on_addstr = fail_on_addstr
        self.frames: List[List[str]] = []
        self.current: List[str] = []
        self.writes = []
        self.erase_count = 0
        self.refresh_count = 0
        self.keys: List[int] = []
        self.nodelay_enabled = False
        self.keypad_enabled = False

    def getmaxyx(self):
        return (self.lines, self.columns)

    def erase(self):
        self.erase_count += 1
        self.current = [""] * self.lines

    def addstr(self, y, x, text, attr=0):
        if self.fail_on_addstr:
            raise curses.error("addwstr() returned ERR")
        self.writes.append((y, x, text, attr))
        line = self.current[y].ljust(x)
        self.current[y] = line[:x] + text + line[x + len(text):]

    def vline(self, y, x, ch, n):
        self.writes.append((y, x, chr(ch) * n, 0))

    def refresh(self):
        self.refresh_count += 1
        self.frames.append(list(self.current))

    def nodelay(self, flag):
        self.nodelay_enabled = flag

    def keypad(self, flag):
        self.keypad_enabled = flag

    def getch(self):
        return self.keys.pop(0) if self.keys else -1


class ScriptedInput:
    """Input source returning a fixed sequence of keys, then nothing."""

    def __init__(self, keys: Sequence[Optional[int]] = ()):
        self.keys = list(keys)
        self.polls = 0

    def poll(self) -> Optional[int]:
        self.polls += 1
        return self.keys.pop(0) if self.keys else None


class FakeClock:
    """Monotonic clock advancing ``tick_cost`` per reading and by each sleep."""

    def __init__(self, start: float = 0.0, tick_cost: float = 0.0):
        self.now = start
        self.tick_cost = tick_cost
        self.sleeps: List[float] = []

    def __call__(self) -> float:
        value = self.now
        self.now += self.tick_cost
        return value

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


def keys(text: str) -> List[int]:
    """Key codes for a string of characters."""
    return [ord(c) for c in text]


@pytest.fixture
def window():
    return FakeWindow()


@pytest.fixture
def clock():
    return FakeClock()
