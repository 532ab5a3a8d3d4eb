"""The playing screen: falling pieces, gravity, line clears and game over."""

import logging
import random
import time

import pygame

from blockdrop.animations import FireTrailAnimation, LineClearAnimation
from blockdrop.board import Board
from blockdrop.constants import BLACK, HEIGHT, SCORES_FILE, WHITE, WIDTH, Button
from blockdrop.leaderboard import (
    ScoreEntry,
    insert_score,
    is_high_score,
    load_scores,
    save_scores,
)
from blockdrop.page import Page
from blockdrop.pieces import random_pattern
from blockdrop.resources import SoundStatus, get_resources
from blockdrop.shake import ShakeManager
from blockdrop.timers import DelayTimer, GravityTimer
from blockdrop.uibar import UIBar

log = logging.getLogger(__name__)

LINE_SCORES = {1: 100, 2: 300, 3: 500, 4: 800}
COUNTDOWN_SECONDS = 4.0
GAME_OVER_SECONDS = 3.0
INITIAL_GRAVITY = 1.0
DIMMED_ALPHA = 100
PAUSE_MESSAGE = "Paused,\nPress 'Play' button to continue..."
GAME_OVER_FRAME = (77, 0, 226, 62)
GAME_OVER_SCALE = 1.5
HOVER_RADIUS = 20
HOVER_COLOR = (255, 255, 0, 100)


def _prompt_name():
    words = input("New high score! Enter your name: ").split()
    return words[0] if words else ""


def _render_line(font, line, color, outline_color, thickness):
    body = font.render(line, True, color)
    if not thickness:
        return body
    edge = font.render(line, True, outline_color)
    image = pygame.Surface(
        (body.get_width() + 2 * thickness, body.get_height() + 2 * thickness),
        pygame.SRCALPHA,
    )
    for dx in (-thickness, 0, thickness):
        for dy in (-thickness, 0, thickness):
            if dx or dy:
                image.blit(edge, (thickness + dx, thickness + dy))
    image.blit(body, (thickness, thickness))
    return image


def _render_text(font, text, color, outline_color=BLACK, thickness=0):
    """Render possibly multi-line text, with an optional outline."""
    lines = [_render_line(font, line, color, outline_color, thickness) for line in text.split("\n")]
    width = max(max(line.get_width() for line in lines), 1)
    height = max(sum(line.get_height() for line in lines), 1)
    image = pygame.Surface((width, height), pygame.SRCALPHA)
    y = 0
    for line in lines:
        image.blit(line, (0, y))
        y += line.get_height()
    return image


class GamePlayPage(Page):
    """The game itself, from the starting countdown to game over."""

    def __init__(
        self,
        window_size,
        resources=None,
        rng=None,
        clock=None,
        scores_path=SCORES_FILE,
        ask_name=None,
    ):
        self._resources = resources if resources is not None else get_resources()
        self._rng = rng if rng is not None else random.Random()
        clock = clock if clock is not None else time.monotonic
        self.window_size = (int(window_size[0]), int(window_size[1]))
        self.scores_path = scores_path
        self._ask_name = ask_name if ask_name is not None else _prompt_name

        self.music = self._resources.music("game_play_music")
        self.music.looping = True
        self.board = Board(self.window_size)
        self.next_piece = random_pattern(self._rng)
        self.current_piece = None
        self.fire_trail = FireTrailAnimation(self._resources)
        self.gravity = GravityTimer(clock)
        self.shake = ShakeManager(self._rng)
        self.animations = []
        self.pending_clear_lines = set()
        self.ui_bar = UIBar(
            self.window_size, self.board.block_size, self.board.offset, self._resources
        )

        self.game_over = False
        self.down_held = False
        self.paused = False
        self.countdown_active = True
        self.back_to_menu = False
        self.score = 0

        self._game_over_delay = DelayTimer(clock)
        self._start_delay = DelayTimer(clock)
        self._last_num_counted = ""
        self._mouse_pos = (0, 0)

        self._set_pause_text()
        self.current_piece = self._spawn_next_pattern()
        self.clear()

    # events -------------------------------------------------------------

    def handle_event(self, event):
        if event.type == pygame.MOUSEMOTION:
            self._mouse_pos = event.pos
        if self.current_piece is None:
            return
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_LEFT:
                self.current_piece.move_left(self.board)
            elif event.key == pygame.K_RIGHT:
                self.current_piece.move_right(self.board)
            elif event.key == pygame.K_DOWN:
                self.current_piece.move_down(self.board)
                self.down_held = True
            elif event.key == pygame.K_UP:
                self.current_piece.rotate(self.board)
        elif event.type == pygame.KEYUP:
            if event.key == pygame.K_DOWN:
                self.down_held = False
                self.fire_trail.stop()
        elif event.type == pygame.MOUSEBUTTONDOWN:
            self._resources.sound("mouse_click").play()
            if event.button == 1:
                self.ui_bar.mouse_button_click(event.pos)
        elif event.type == pygame.MOUSEBUTTONUP:
            if event.button == 1:
                self.handle_button_click(self.ui_bar.mouse_button_handle())

    def handle_button_click(self, button):
        """Act on the side-bar button that was clicked."""
        if button is Button.PAUSE:
            self._pause_music()
            self.paused = True
        elif button is Button.PLAY:
            self._play_music()
            self.paused = False
        elif button is Button.RETRY:
            self._stop_music()
            self.clear()
        elif button is Button.HOME:
            self._stop_music()
            self.back_to_menu = True

    # state --------------------------------------------------------------

    def clear(self):
        """Reset to a fresh game waiting for the starting countdown."""
        self.board.clear()
        self.current_piece = None
        self.next_piece = random_pattern(self._rng)
        self.ui_bar.update_next_piece(self.next_piece)

        self.countdown_active = True
        self._start_delay.start(COUNTDOWN_SECONDS)
        self._last_num_counted = ""

        self.animations.clear()
        self.pending_clear_lines = set()

        self.down_held = False
        self.game_over = False
        self.paused = False
        self._game_over_delay.reset()

        self.back_to_menu = False
        self.score = 0
        self.ui_bar.update_score(self.score)
        self.ui_bar.reset_buttons()

    def add_score(self, lines_cleared):
        """Add the points for clearing the given number of lines at once."""
        self.score += LINE_SCORES.get(lines_cleared, 0)
        log.debug("Score: %s", self.score)
        return self.score

    def update(self, dt):
        """Advance the game by dt seconds."""
        if self.countdown_active:
            if self._start_delay.is_done():
                self.countdown_active = False
                self.current_piece = self._spawn_next_pattern()
                self._play_music()
                self.gravity.start(INITIAL_GRAVITY)
            return
        if self.game_over:
            if self._game_over_delay.is_done():
                self.check_for_high_score()
                self.back_to_menu = True
            return
        if self.paused:
            self.ui_bar.update()
            return

        self.ui_bar.update()
        self.shake.update(dt)
        self._update_animations(dt)
        if self.animations:
            return
        if self._handle_pending_line_clears():
            return
        if self.current_piece is None:
            return
        self._handle_gravity()
        self._update_fire_trail(dt)

    def ghost_pivot(self):
        """The pivot where the current piece would land if dropped straight down."""
        x, y = self.current_piece.pivot
        while not self.board.check_collision(self.current_piece.pattern_positions((x, y + 1))):
            y += 1
        return (x, y)

    def check_for_high_score(self):
        """Ask for a name and store the score if it makes the leaderboard."""
        scores = load_scores(self.scores_path)
        if not is_high_score(scores, self.score):
            return False
        name = self._ask_name()
        save_scores(self.scores_path, insert_score(scores, ScoreEntry(name, self.score)))
        return True

    # helpers ------------------------------------------------------------

    def _spawn_next_pattern(self):
        spawned = self.next_piece
        self.next_piece = random_pattern(self._rng)
        self.ui_bar.update_next_piece(self.next_piece)
        return spawned

    def _update_animations(self, dt):
        for animation in self.animations:
            animation.update(dt)
        self.animations = [a for a in self.animations if not a.is_finished()]

    def _handle_pending_line_clears(self):
        if not self.pending_clear_lines:
            return False
        self.board.clear_lines_from_grid(self.pending_clear_lines)
        self.board.collapse_lines(self.pending_clear_lines)
        log.debug("Board after clear:\n%s", self.board)
        self.pending_clear_lines = set()
        self.current_piece = self._spawn_next_pattern()
        self.gravity.speed_up()
        return True

    def _handle_gravity(self):
        if not self.gravity.should_fall():
            return
        piece = self.current_piece
        below = (piece.pivot[0], piece.pivot[1] + 1)
        if not self.board.check_collision(piece.pattern_positions(below)):
            piece.move_down(self.board)
        else:
            self._resources.sound("lock_piece").play()
            self.fire_trail.stop()
            affected = self.board.lock_piece(piece)
            full_lines = self.board.find_full_lines(affected)
            if full_lines:
                self.add_score(len(full_lines))
                self.ui_bar.update_score(self.score)
                self.board.clear_lines_from_grid(full_lines)
                self.shake.start(len(full_lines), len(full_lines))
                explosion = LineClearAnimation(self._resources)
                explosion.start(full_lines)
                self.animations.append(explosion)
                self.pending_clear_lines = set(full_lines)
                self.current_piece = None
            else:
                self.current_piece = self._spawn_next_pattern()
                if self._is_game_over():
                    self._stop_music()
                    self.current_piece = None
        self.gravity.reset()

    def _update_fire_trail(self, dt):
        if not self.down_held or self.current_piece is None:
            return
        blocks = self.current_piece.pattern_positions()
        if not blocks:
            return
        avg_col = sum(x for x, _ in blocks) / len(blocks)
        max_row = max(0, max(y for _, y in blocks))
        size = self.board.block_size
        ox, oy = self.board.offset
        self.fire_trail.start((ox + avg_col * size, oy + (max_row + 1) * size))
        self.fire_trail.update(dt)

    def _is_game_over(self):
        for col, row in self.current_piece.pattern_positions():
            if not (0 <= row < HEIGHT and 0 <= col < WIDTH):
                continue
            if self.board.get_cell(row, col) != "_":
                self.game_over = True
                self._game_over_delay.start(GAME_OVER_SECONDS)
                break
        return self.game_over

    def _stop_music(self):
        if self.music.status in (SoundStatus.PLAYING, SoundStatus.PAUSED):
            self.music.stop()

    def _pause_music(self):
        if self.music.status is SoundStatus.PLAYING:
            self.music.pause()

    def _play_music(self):
        if self.music.status in (SoundStatus.STOPPED, SoundStatus.PAUSED):
            self.music.play()

    def _countdown_label(self):
        left = self._start_delay.duration - self._start_delay.elapsed()
        if left > 3.0:
            return "3"
        if left > 2.0:
            return "2"
        if left > 1.0:
            return "1"
        return "Go!"

    def _set_pause_text(self):
        outline = tuple(self._rng.randrange(256) for _ in range(3))
        font = self._resources.font("main", 20)
        self._pause_image = _render_text(font, PAUSE_MESSAGE, WHITE, outline, 2)
        ox, oy = self.board.offset
        centre = (
            round(ox + WIDTH * self.board.block_size / 2),
            round(oy + HEIGHT * self.board.block_size / 2),
        )
        self._pause_rect = self._pause_image.get_rect(center=centre)

    # drawing ------------------------------------------------------------

    def draw(self, surface):
        if self.countdown_active:
            self.board.draw(surface, DIMMED_ALPHA)
            self.ui_bar.draw(surface, DIMMED_ALPHA)
            self._draw_countdown(surface)
            return
        if self.game_over:
            self.board.draw(surface, DIMMED_ALPHA)
            self.ui_bar.draw(surface, DIMMED_ALPHA)
            self._draw_game_over(surface)
            return
        if self.paused:
            self.board.draw(surface, DIMMED_ALPHA)
            self.ui_bar.draw(surface)
            if self.current_piece is not None:
                self.current_piece.draw(surface, self.board, DIMMED_ALPHA)
            surface.blit(self._pause_image, self._pause_rect)
            if self._pause_rect.collidepoint(self._mouse_pos):
                self._draw_hover_circle(surface)
            return

        dx, dy = self.shake.offset
        shaking = bool(dx or dy)
        target = pygame.Surface(surface.get_size(), pygame.SRCALPHA) if shaking else surface

        self.board.draw(target)
        self.ui_bar.draw(target)
        if self.next_piece is None:
            self.next_piece = random_pattern(self._rng)
        self.fire_trail.draw(target, self.board.block_size, self.board.offset)
        if self.current_piece is not None:
            self.current_piece.draw(target, self.board)
            self.current_piece.draw_ghost(target, self.board, self.ghost_pivot())
        for animation in self.animations:
            animation.draw(target, self.board.block_size, self.board.offset)

        if shaking:
            surface.blit(target, (round(-dx), round(-dy)))

    def _draw_hover_circle(self, surface):
        side = 2 * HOVER_RADIUS
        circle = pygame.Surface((side, side), pygame.SRCALPHA)
        pygame.draw.circle(circle, HOVER_COLOR, (HOVER_RADIUS, HOVER_RADIUS), HOVER_RADIUS)
        mx, my = self._mouse_pos
        surface.blit(circle, (mx - HOVER_RADIUS, my - HOVER_RADIUS))

    def _draw_countdown(self, surface):
        label = self._countdown_label()
        if label != self._last_num_counted:
            self._last_num_counted = label
            self._resources.sound(label).play()
        image = _render_text(self._resources.font("main", 100), label, WHITE)
        width, height = surface.get_size()
        surface.blit(image, image.get_rect(center=(width // 2, height // 2)))

    def _draw_game_over(self, surface):
        width, height = surface.get_size()
        texture = self._resources.texture("game_over_pic")
        clipped = pygame.Rect(GAME_OVER_FRAME).clip(texture.get_rect())
        if clipped.width and clipped.height:
            frame = texture.subsurface(clipped)
            scaled = (
                max(1, round(clipped.width * GAME_OVER_SCALE)),
                max(1, round(clipped.height * GAME_OVER_SCALE)),
            )
            image = pygame.transform.scale(frame, scaled)
            surface.blit(
                image,
                (round(width / 2 - scaled[0] / 2), round(height / 3 - scaled[1] / 2)),
            )
        text = _render_text(
            self._resources.font("main", 30), f"Your score is: {self.score}", WHITE, BLACK, 2
        )
        surface.blit(text, text.get_rect(center=(width // 2, height // 2)))