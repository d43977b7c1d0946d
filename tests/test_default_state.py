import pygame
import pytest

from dangame.default_state import DefaultState
from dangame.identifiers import FontID, StateID, TextureID
from dangame.resources import ResourceHolder
from dangame.state import Context, StateStack

BACKGROUND = (10, 200, 30)


@pytest.fixture
def context():
    pygame.font.init()

    def load_texture(filename):
        surface = pygame.Surface((320, 240))
        surface.fill(BACKGROUND)
        return surface

    textures = ResourceHolder(load_texture)
    textures.load(TextureID.TITLE_SCREEN, "title.png")
    fonts = ResourceHolder(lambda filename: pygame.font.Font(None, 24))
    fonts.load(FontID.MAIN, "main.ttf")
    return Context(window=pygame.Surface((320, 240)), textures=textures, fonts=fonts)


@pytest.fixture
def stack(context):
    stack = StateStack(context)
    stack.register_state(StateID.TITLE, DefaultState)
    stack.push_state(StateID.TITLE)
    stack.update(0.0)
    return stack


def test_text_starts_visible_and_centred(context, stack):
    state = DefaultState(stack, context)
    assert state.show_text is True
    rect = state.text_surface.get_rect(topleft=state.text_position)
    assert abs(rect.centerx - 160) <= 1
    assert abs(rect.centery - 120) <= 1


def test_update_toggles_text_after_interval(context, stack):
    state = DefaultState(stack, context)
    assert state.update(DefaultState.BLINK_INTERVAL / 2) is True
    assert state.show_text is True
    state.update(DefaultState.BLINK_INTERVAL)
    assert state.show_text is False
    state.update(DefaultState.BLINK_INTERVAL * 1.5)
    assert state.show_text is True


def test_draw_hidden_text_shows_only_background(context, stack):
    state = DefaultState(stack, context)
    state.show_text = False
    state.draw()
    window = context.window
    assert tuple(window.get_at((0, 0)))[:3] == BACKGROUND
    assert tuple(window.get_at((160, 120)))[:3] == BACKGROUND


def test_draw_visible_text_paints_text_colour(context, stack):
    state = DefaultState(stack, context)
    state.draw()
    window = context.window
    rect = state.text_surface.get_rect(topleft=state.text_position)
    colours = {
        tuple(window.get_at((x, y)))[:3]
        for x in range(rect.left, rect.right)
        for y in range(rect.top, rect.bottom)
    }
    assert DefaultState.TEXT_COLOR in colours


def test_key_press_pops_state(stack):
    assert len(stack) == 1
    stack.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_a))
    assert stack.is_empty()


def test_other_event_keeps_state(context, stack):
    state = DefaultState(stack, context)
    result = state.handle_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(0, 0)))
    assert result is False
    stack.handle_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(0, 0)))
    assert len(stack) == 1