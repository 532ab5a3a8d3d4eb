"""The application: the window, the main loop and switching between pages."""

import argparse
import logging
import os
import time

import pygame

from blockdrop.about import AboutPage
from blockdrop.constants import BLACK, MenuOptions
from blockdrop.gameplay import GamePlayPage
from blockdrop.leaderboard_page import LeaderboardPage
from blockdrop.menu import MenuMain
from blockdrop.resources import ResourceError, ResourceManager
from blockdrop.timers import DelayTimer

log = logging.getLogger(__name__)

WINDOW_SIZE = (800, 600)
CAPTION = "Block drop"
FRAME_RATE = 60
EXIT_FADE_SECONDS = 1.0

RESOURCE_FILES = (
    ("font", "main", "Arial.ttf"),
    ("music", "menu", "Menu_Music.ogg"),
    ("sound", "page_transition", "SwitchPage.wav"),
    ("sound", "mouse_click", "MouseClick.wav"),
    ("texture", "menu_bg_pic", "menuBackGroundPic.jpeg"),
    ("texture", "about_bg_pic", "aboutPageBGPic.jpeg"),
    ("sound", "before_explosion", "BeforeExplosion.wav"),
    ("sound", "explosion_sound", "ClearLineExplosion.wav"),
    ("music", "game_play_music", "GamePlayMusic.ogg"),
    ("sound", "lock_piece", "LockPiecec.wav"),
    ("texture", "block_explosion", "TetrisBlockExplosion.png"),
    ("texture", "game_over_pic", "GameOverSign.png"),
    ("texture", "fire_trail", "MovingDownFastNew.png"),
    ("texture", "ui_bar_bg", "BarBG.png"),
    ("texture", "buttons", "Buttons.png"),
    ("sound", "3", "3Count.wav"),
    ("sound", "2", "2Count.wav"),
    ("sound", "1", "1Count.wav"),
    ("sound", "Go!", "GoCount.wav"),
)


def load_resources(resources, resource_dir):
    """Load every asset from the directory; stop and log at the first failure.

    Returns True when everything loaded.
    """
    loaders = {
        "font": resources.load_font,
        "music": resources.load_music,
        "sound": resources.load_sound,
        "texture": resources.load_texture,
    }
    try:
        for kind, name, filename in RESOURCE_FILES:
            loaders[kind](name, os.path.join(os.fspath(resource_dir), filename))
    except ResourceError as exc:
        log.error("Resource error: %s", exc)
        return False
    return True


class Game:
    """Owns the window and the pages, and runs the main loop."""

    def __init__(self, resource_dir="resources", scores_path=None):
        self.resource_dir = os.fspath(resource_dir)
        self.scores_path = (
            scores_path
            if scores_path is not None
            else os.path.join(self.resource_dir, "scores.txt")
        )
        self.resources = ResourceManager()
        self.window_size = WINDOW_SIZE
        self.menu = None
        self.about = None
        self.gameplay = None
        self.leaderboard = None
        self.current_page = None
        self.running = False
        self._delay = DelayTimer()
        self._pending_exit = False
        self._music_to_fade = None
        self._fade_music = False

    def run(self):
        """Open the window and play until it is closed or Exit is chosen."""
        pygame.init()
        surface = pygame.display.set_mode(self.window_size)
        pygame.display.set_caption(CAPTION)
        load_resources(self.resources, self.resource_dir)

        self.menu = MenuMain(self.window_size, self.resources)
        self.about = AboutPage(self.window_size, self.resources)
        self.gameplay = GamePlayPage(
            self.window_size, self.resources, scores_path=self.scores_path
        )
        self.leaderboard = LeaderboardPage(self.window_size, self.resources, self.scores_path)
        self.current_page = self.menu

        ticker = pygame.time.Clock()
        last = time.monotonic()
        self.running = True
        while self.running:
            for event in pygame.event.get():
                if self._delay.is_active():
                    continue
                if event.type == pygame.QUIT:
                    self.running = False
                self.current_page.handle_event(event)
            if not self.running:
                break
            if self._delayed_handle(surface):
                ticker.tick(FRAME_RATE)
                continue
            now = time.monotonic()
            dt, last = now - last, now
            self._switch_pages(dt)

            surface.fill(BLACK)
            self.current_page.draw(surface)
            pygame.display.flip()
            ticker.tick(FRAME_RATE)

    def _delayed_handle(self, surface):
        """While a delay runs, fade music and redraw; True means skip the frame."""
        if not self._delay.is_active():
            return False
        if self._delay.is_done():
            self._delay.reset()
            self._fade_music = False
            self._music_to_fade = None
            if self._pending_exit:
                self.running = False
                return True
            return False
        if self._fade_music and self._music_to_fade is not None:
            fraction = self._delay.elapsed() / self._delay.duration
            self._music_to_fade.set_volume(max(0.0, 100.0 * (1.0 - fraction)))
        surface.fill(BLACK)
        self.current_page.draw(surface)
        pygame.display.flip()
        return True

    def _start_music_fade(self, music_name, seconds):
        self._music_to_fade = self.resources.music(music_name)
        self._fade_music = True
        self._delay.start(seconds)

    def _switch_pages(self, dt):
        page_sound = self.resources.sound("page_transition")
        page = self.current_page
        if page is self.menu:
            selection = self.menu.selection
            if selection is MenuOptions.ABOUT:
                page_sound.play()
                self.current_page = self.about
            elif selection is MenuOptions.EXIT:
                page_sound.play()
                self._pending_exit = True
                self._start_music_fade("menu", EXIT_FADE_SECONDS)
            elif selection is MenuOptions.PLAY:
                page_sound.play()
                self.menu.stop_music()
                self.menu.reset_selection()
                self.current_page = self.gameplay
                self.gameplay.clear()
            elif selection is MenuOptions.LEADERS_BOARD:
                page_sound.play()
                self.leaderboard.load_scores()
                self.current_page = self.leaderboard
        elif page is self.gameplay:
            if self.gameplay.back_to_menu:
                self._back_to_menu()
                page_sound.play()
                self.menu.play_music()
            else:
                self.gameplay.update(dt)
        elif page.back_to_menu:
            self._back_to_menu()
            page_sound.play()

    def _back_to_menu(self):
        self.gameplay.clear()
        self.menu.reset_selection()
        self.current_page = self.menu
        self.about.reset()
        self.leaderboard.reset()


def main(argv=None):
    parser = argparse.ArgumentParser(prog="blockdrop", description="A falling-blocks puzzle game.")
    parser.add_argument("--resources", default="resources", help="directory holding the assets")
    parser.add_argument("--scores", default=None, help="high-score file")
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.WARNING)
    game = Game(args.resources, args.scores)
    try:
        game.run()
    finally:
        pygame.quit()
    return 0