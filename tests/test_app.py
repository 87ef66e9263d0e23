import pygame
import pytest

from connect4.app import (
    BACKGROUND,
    CHIP_COLOURS,
    EMPTY_COLOUR,
    Renderer,
    handle_event,
    translate_key,
)
from connect4.board import RED, WIDTH, YELLOW
from connect4.session import GameSession, Key


class FixedSolver:
    def __init__(self, column):
        self.column = column
        self.evaluated = 0
        self.last_score = 0

    def choose_move(self, board):
        return self.column


@pytest.fixture
def session():
    return GameSession(FixedSolver(0), True)


def _pixel(surface, x, y):
    return tuple(surface.get_at((x, y)))[:3]


@pytest.mark.parametrize(
    "code, key",
    [
        (pygame.K_LEFT, Key.LEFT),
        (pygame.K_a, Key.A),
        (pygame.K_RIGHT, Key.RIGHT),
        (pygame.K_d, Key.D),
        (pygame.K_SPACE, Key.SPACE),
        (pygame.K_s, Key.S),
        (pygame.K_DOWN, Key.DOWN),
        (pygame.K_r, Key.R),
        (pygame.K_q, Key.Q),
        (pygame.K_x, Key.OTHER),
    ],
)
def test_translate_key(code, key):
    assert translate_key(code) is key


def test_quit_event_stops(session):
    assert handle_event(session, pygame.event.Event(pygame.QUIT), 0) is False
    assert session.should_quit


def test_quit_event_without_quit_allowed():
    session = GameSession(FixedSolver(0), False)
    assert handle_event(session, pygame.event.Event(pygame.QUIT), 0) is False
    assert not session.should_quit


def test_q_key_event_quits(session):
    event = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_q)
    assert handle_event(session, event, 3) is False
    assert session.should_quit


def test_key_events_track_pressed_keys(session):
    assert handle_event(session, pygame.event.Event(pygame.KEYDOWN, key=pygame.K_LEFT), 3)
    assert Key.LEFT in session.keys_pressed
    handle_event(session, pygame.event.Event(pygame.KEYUP, key=pygame.K_LEFT), 4)
    assert Key.LEFT not in session.keys_pressed


def test_mouse_events_play_column(session):
    tile = session.layout().tile_size
    handle_event(session, pygame.event.Event(pygame.MOUSEMOTION, pos=(4 * tile + 2, 10)), 5)
    assert session.mouse_column == 4
    handle_event(session, pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(4 * tile, 10)), 6)
    assert session.board.cell(4, 0) == RED
    assert session.board.cell(0, 0) == YELLOW


def test_right_click_is_ignored(session):
    handle_event(session, pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=3, pos=(0, 0)), 6)
    assert session.board.moves == 0


def test_resize_event(session):
    event = pygame.event.Event(pygame.VIDEORESIZE, w=1400, h=900, size=(1400, 900))
    assert handle_event(session, event, 0)
    assert (session.window_width, session.window_height) == (1400, 900)


def test_draw_board_cells(session):
    surface = pygame.Surface((session.window_width, session.window_height))
    session.board.add_chip(3)
    Renderer(surface, None).draw(session)
    layout = session.layout()
    tile = layout.tile_size
    bottom = layout.board_y + (6 - 1) * tile + tile // 2
    assert _pixel(surface, 3 * tile + tile // 2, bottom) == CHIP_COLOURS[RED]
    assert _pixel(surface, tile // 2, bottom) == EMPTY_COLOUR
    assert _pixel(surface, session.window_width - 2, 2) == BACKGROUND


def test_draw_preview_uses_player_to_move(session):
    surface = pygame.Surface((session.window_width, session.window_height))
    renderer = Renderer(surface, None)
    layout = session.layout()
    tile = layout.tile_size
    centre = (session.current_column * tile + tile // 2, layout.preview_y + tile // 2)
    renderer.draw(session)
    assert _pixel(surface, *centre) == CHIP_COLOURS[RED]
    session.board.add_chip(WIDTH - 1)
    renderer.draw(session)
    assert _pixel(surface, *centre) == CHIP_COLOURS[YELLOW]


def test_draw_menu_text_with_font(session):
    pygame.font.init()
    font = pygame.font.Font(None, 24)
    surface = pygame.Surface((session.window_width, session.window_height))
    Renderer(surface, font).draw(session)
    menu_height = session.layout().menu_height
    coloured = [
        (x, y)
        for x in range(0, session.window_width, 2)
        for y in range(menu_height)
        if _pixel(surface, x, y) != BACKGROUND
    ]
    assert len(coloured) > 0