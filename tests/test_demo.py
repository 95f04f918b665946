"""Tests for demo mode: the seed browser and the sidebar driver."""

import curses
from types import SimpleNamespace

import pytest
import numpy as np

from conftest import FakeClock, FakeWindow, keys
from lifeterm.core.patterns import GLIDER
from lifeterm.demo import SIDEBAR_WIDTH, SeedBrowser, build_demo_driver, draw_sidebar
from lifeterm.errors import ConfigError, TerminalError
from lifeterm.loop import LoopState
from lifeterm.playback import PlaybackState


@pytest.fixture
def seeds_dir(tmp_path):
    (tmp_path / "b_glider.txt").write_text(".*.\n..*\n***\n")
    (tmp_path / "a_block.txt").write_text("**\n**\n")
    (tmp_path / "c_a_very_long_seed_name.txt").write_text("***\n")
    (tmp_path / "subdir").mkdir()
    return tmp_path


class WindowFactory:
    def __init__(self):
        self.windows = []

    def __call__(self, nlines, ncols, begin_y, begin_x):
        window = FakeWindow(lines=nlines, columns=ncols)
        window.origin = (begin_y, begin_x)
        self.windows.append(window)
        return window


class TestSeedBrowser:

    def test_sorted_files_only(self, seeds_dir):
        browser = SeedBrowser(seeds_dir)
        assert [p.name for p in browser.paths] == [
            "a_block.txt", "b_glider.txt", "c_a_very_long_seed_name.txt"]
        assert len(browser) == 3

    def test_next_wraps(self, seeds_dir):
        browser = SeedBrowser(seeds_dir)
        browser.next()
        browser.next()
        assert browser.next().name == "a_block.txt"

    def test_previous_wraps(self, seeds_dir):
        browser = SeedBrowser(seeds_dir)
        assert browser.previous().name == "c_a_very_long_seed_name.txt"

    def test_current_pattern(self, seeds_dir):
        browser = SeedBrowser(seeds_dir)
        browser.next()
        assert np.array_equal(browser.current_pattern(), GLIDER)

    def test_long_names_truncated(self, seeds_dir):
        names = SeedBrowser(seeds_dir).names(SIDEBAR_WIDTH)
        assert names[0] == "a_block.txt"
        assert names[2] == "c_a_very_long..."
        assert all(len(name) <= SIDEBAR_WIDTH - 4 for name in names)

    def test_empty_directory(self, tmp_path):
        with pytest.raises(ConfigError, match="No seed files"):
            SeedBrowser(tmp_path)

    def test_missing_directory(self, tmp_path):
        with pytest.raises(ConfigError, match="Cannot list"):
            SeedBrowser(tmp_path / "missing")


class TestSidebar:

    def test_selected_seed_highlighted(self, seeds_dir):
        window = FakeWindow(lines=10, columns=SIDEBAR_WIDTH)
        browser = SeedBrowser(seeds_dir)
        browser.next()

        draw_sidebar(window, browser)

        names = [(y, text, attr) for y, x, text, attr in window.writes if x == 2]
        assert names[0] == (1, "a_block.txt", curses.A_NORMAL)
        assert names[1] == (2, "b_glider.txt", curses.A_REVERSE)
        assert (0, SIDEBAR_WIDTH - 1, "|" * 10, 0) in window.writes

    def test_failure_raises_terminal_error(self, seeds_dir):
        window = FakeWindow(lines=10, columns=SIDEBAR_WIDTH, fail_on_addstr=True)
        with pytest.raises(TerminalError):
            draw_sidebar(window, SeedBrowser(seeds_dir))


class TestDemoDriver:

    def make_driver(self, seeds_dir, lines=10, columns=40):
        session = SimpleNamespace(lines=lines, columns=columns)
        factory = WindowFactory()
        driver = build_demo_driver(session, PlaybackState(100), SeedBrowser(seeds_dir), factory)
        sidebar, display = factory.windows
        return driver, sidebar, display

    def test_layout(self, seeds_dir):
        driver, sidebar, display = self.make_driver(seeds_dir)

        assert sidebar.origin == (0, 0)
        assert display.origin == (0, SIDEBAR_WIDTH + 1)
        assert driver.context.board.shape == (9, 18)
        assert display.keypad_enabled

    def test_starts_from_first_seed(self, seeds_dir):
        driver, _, _ = self.make_driver(seeds_dir)
        assert driver.context.board.live_count() == 4

    def test_switch_seeds_then_quit(self, seeds_dir):
        driver, sidebar, display = self.make_driver(seeds_dir)
        display.keys = keys("j") + [curses.KEY_UP, curses.KEY_UP] + keys("q")
        clock = FakeClock()
        driver.clock = clock
        driver.sleep = clock.sleep

        assert driver.run() is LoopState.STOPPED

        assert driver.ticks == 4
        assert driver.browser.current.name == "c_a_very_long_seed_name.txt"
        assert sidebar.refresh_count == 4

    def test_switch_reloads_board(self, seeds_dir):
        driver, _, display = self.make_driver(seeds_dir)
        display.keys = keys("j")

        driver.tick()

        board = driver.context.board
        assert board.generation == 0
        assert np.array_equal(board.state[:3, :3], GLIDER)

    def test_too_narrow(self, seeds_dir):
        with pytest.raises(TerminalError, match="too small"):
            self.make_driver(seeds_dir, columns=SIDEBAR_WIDTH + 2)
