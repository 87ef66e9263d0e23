"""Window, drawing and event loop for playing against the computer."""

from __future__ import annotations

import argparse

import pygame

from .board import HEIGHT, RED, WIDTH, YELLOW
from .session import BASE_TILE_SIZE, GameSession, Key

FPS = 60
BACKGROUND = (0, 0, 40)
MENU_COLOUR = (255, 255, 100)
BOARD_COLOUR = (20, 40, 160)
EMPTY_COLOUR = (10, 10, 60)
CHIP_COLOURS = {RED: (230, 40, 40), YELLOW: (250, 220, 40)}
TEXT_MARGIN = 6

_KEY_MAP = {
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_SPACE: Key.SPACE,
    pygame.K_a: Key.A,
    pygame.K_d: Key.D,
    pygame.K_s: Key.S,
    pygame.K_r: Key.R,
    pygame.K_q: Key.Q,
}


def translate_key(pygame_key: int) -> Key:
    """Map a pygame key code to the game's key."""
    return _KEY_MAP.get(pygame_key, Key.OTHER)


def handle_event(session: GameSession, event: pygame.event.Event, now: int) -> bool:
    """Feed one event to the session; return False to stop reading events."""
    if event.type == pygame.QUIT:
        if session.allow_quit:
            session.should_quit = True
        return False
    if event.type == pygame.KEYDOWN:
        session.key_down(translate_key(event.key), now)
        return not session.should_quit
    if event.type == pygame.KEYUP:
        session.key_up(translate_key(event.key))
    elif event.type == pygame.MOUSEMOTION:
        session.mouse_motion(event.pos[0], now)
    elif event.type == pygame.MOUSEBUTTONDOWN:
        if event.button == 1:
            session.mouse_click()
    elif event.type == pygame.VIDEORESIZE:
        session.resize(event.w, event.h)
    return True


def _wrap(font: pygame.font.Font, text: str, width: int) -> list[str]:
    lines: list[str] = []
    current = ""
    for word in text.split(" "):
        candidate = f"{current} {word}" if current else word
        if current and font.size(candidate)[0] > width:
            lines.append(current)
            current = word
        else:
            current = candidate
    if current:
        lines.append(current)
    return lines


class Renderer:
    """Draws a game session onto a pygame surface."""

    def __init__(self, surface: pygame.Surface, font: pygame.font.Font | None) -> None:
        self.surface = surface
        self.font = font

    def _text_lines(self, text, colour, width):
        return [self.font.render(line, True, colour) for line in _wrap(self.font, text, width)]

    def _draw_menu(self, session: GameSession) -> None:
        width = max(session.window_width - 2 * TEXT_MARGIN, 1)
        y = 0
        for rendered in self._text_lines(session.menu_text(), MENU_COLOUR, width):
            area = pygame.Rect(0, 0, min(rendered.get_width(), width), rendered.get_height())
            self.surface.blit(rendered, (TEXT_MARGIN, y), area)
            y += rendered.get_height()

    def _draw_status(self, session: GameSession) -> None:
        message = session.status_message()
        if message is None:
            return
        text, colour = message
        width = max(session.window_width - 2 * TEXT_MARGIN, 1)
        y = session.layout().status_y
        for rendered in self._text_lines(text, colour, width):
            x = max((session.window_width - rendered.get_width()) // 2, 0)
            self.surface.blit(rendered, (x, y))
            y += rendered.get_height()

    def _draw_chip(self, colour, left: int, top: int, tile: int) -> None:
        centre = (left + tile // 2, top + tile // 2)
        pygame.draw.circle(self.surface, colour, centre, max(int(tile * 0.4), 1))

    def _draw_preview(self, session: GameSession) -> None:
        layout = session.layout()
        colour = CHIP_COLOURS[RED if session.board.moves % 2 == 0 else YELLOW]
        tile = layout.tile_size
        self._draw_chip(colour, session.current_column * tile, layout.preview_y, tile)

    def _draw_board(self, session: GameSession) -> None:
        layout = session.layout()
        tile = layout.tile_size
        for column in range(WIDTH):
            for row in range(HEIGHT):
                left = column * tile
                top = layout.board_y + (HEIGHT - 1 - row) * tile
                pygame.draw.rect(self.surface, BOARD_COLOUR, (left, top, tile, tile))
                chip = session.board.cell(column, row)
                colour = CHIP_COLOURS[chip] if chip else EMPTY_COLOUR
                self._draw_chip(colour, left, top, tile)

    def draw(self, session: GameSession) -> None:
        """Draw the whole frame for ``session``."""
        self.surface.fill(BACKGROUND)
        if self.font is not None:
            self._draw_menu(session)
            self._draw_status(session)
        if session.layout().tile_size > 0:
            self._draw_preview(session)
            self._draw_board(session)


def main(argv: list[str] | None = None) -> int:
    """Open the game window and play until the user quits."""
    parser = argparse.ArgumentParser(prog="connect4", description="Play Connect Four against the computer.")
    parser.parse_args(argv)

    pygame.init()
    try:
        session = GameSession()
        screen = pygame.display.set_mode(
            (session.window_width, session.window_height), pygame.RESIZABLE
        )
        pygame.display.set_caption("Connect-4")
        font = None
        try:
            font = pygame.font.Font(None, 24 * session.window_width // (BASE_TILE_SIZE * WIDTH))
        except (pygame.error, OSError) as exc:
            print(f"Font error: {exc}")
        renderer = Renderer(screen, font)
        clock = pygame.time.Clock()

        while not session.should_quit:
            now = pygame.time.get_ticks()
            if session.accepts_input:
                for event in pygame.event.get():
                    if not handle_event(session, event, now):
                        break
            if session.should_quit:
                break
            for announcement in session.advance(now):
                print(announcement)
            renderer.surface = pygame.display.get_surface()
            renderer.draw(session)
            pygame.display.flip()
            clock.tick(FPS)
    finally:
        pygame.quit()
    return 0