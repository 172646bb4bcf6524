import pygame
import pytest

from scratchpad.app import BLACK, WHITE, ScratchPad, main


def key(k, mod=0):
    return pygame.event.Event(pygame.KEYDOWN, key=k, mod=mod)


def ctrl(k):
    return key(k, pygame.KMOD_LCTRL)


@pytest.fixture
def pad(tmp_path):
    p = ScratchPad(None, tmp_path / "images")
    p.ticks = lambda: 1000
    return p


def type_text(pad, text):
    for ch in text:
        pad.handle_event(pygame.event.Event(pygame.TEXTINPUT, text=ch))


def lit_pixels(surface, xs, ys):
    return sum(1 for x in xs for y in ys if surface.get_at((x, y))[:3] != (0, 0, 0))


def test_text_input_and_special_keys(pad):
    type_text(pad, "ab")
    pad.handle_event(key(pygame.K_RETURN))
    pad.handle_event(key(pygame.K_TAB))
    assert str(pad.text) == "ab\n\t"
    pad.handle_event(key(pygame.K_BACKSPACE))
    assert str(pad.text) == "ab\n"
    assert pad.cursor_visible is False


def test_text_input_takes_first_character(pad):
    pad.handle_event(pygame.event.Event(pygame.TEXTINPUT, text="xyz"))
    assert str(pad.text) == "x"


def test_copy_after_select_all(pad):
    type_text(pad, "note")
    pad.handle_event(ctrl(pygame.K_a))
    assert pad.ctrl_a_pressed
    pad.handle_event(ctrl(pygame.K_c))
    assert pad.clipboard == "note"
    assert str(pad.text) == "note"
    assert not pad.ctrl_a_pressed


def test_copy_without_select_all_does_nothing(pad):
    type_text(pad, "note")
    pad.handle_event(ctrl(pygame.K_c))
    assert pad.clipboard == ""


def test_cut_after_select_all(pad):
    type_text(pad, "cut me")
    pad.handle_event(ctrl(pygame.K_a))
    pad.handle_event(ctrl(pygame.K_x))
    assert pad.clipboard == "cut me"
    assert len(pad.text) == 0
    assert not pad.ctrl_a_pressed


def test_select_all_backspace_resets_everything(pad):
    type_text(pad, "hi")
    pad.handle_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(5, 5)))
    pad.handle_event(pygame.event.Event(pygame.MOUSEMOTION, pos=(20, 20), rel=(15, 15), buttons=(1, 0, 0)))
    assert len(pad.points) == 2
    pad.handle_event(ctrl(pygame.K_a))
    pad.handle_event(key(pygame.K_BACKSPACE))
    assert len(pad.points) == 0
    assert len(pad.text) == 0
    assert not pad.ctrl_a_pressed


def test_dark_mode_toggle_swaps_colors(pad):
    assert (pad.text_color, pad.background_color) == (WHITE, BLACK)
    pad.handle_event(ctrl(pygame.K_d))
    assert (pad.text_color, pad.background_color) == (BLACK, WHITE)
    assert pad.dark_mode is False


def test_stroke_points(pad):
    pad.handle_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(10, 10)))
    pad.handle_event(pygame.event.Event(pygame.MOUSEMOTION, pos=(10, 10), rel=(0, 0), buttons=(1, 0, 0)))
    pad.handle_event(pygame.event.Event(pygame.MOUSEMOTION, pos=(30, 10), rel=(20, 0), buttons=(1, 0, 0)))
    pad.handle_event(pygame.event.Event(pygame.MOUSEBUTTONUP, button=1, pos=(30, 10)))
    pts = list(pad.points)
    assert [(p.x, p.y, p.connect) for p in pts] == [
        (10, 10, True), (30, 10, True), (30, 10, False)
    ]
    assert all(p.line_thickness == 2 for p in pts)
    assert not pad.is_drawing
    assert pad.last_activity == 1000


def test_eraser_mode_ignores_mouse(pad):
    pad.handle_event(ctrl(pygame.K_e))
    assert pad.eraser_mode
    pad.handle_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(10, 10)))
    assert len(pad.points) == 0
    assert not pad.is_drawing


def test_keypad_plus_minus(pad):
    pad.handle_event(key(pygame.K_KP_PLUS))
    assert pad.line_thickness == 3
    pad.handle_event(ctrl(pygame.K_KP_PLUS))
    assert pad.line_thickness == 4
    assert pad.font_size == 17
    pad.handle_event(ctrl(pygame.K_KP_MINUS))
    assert pad.font_size == 16
    assert pad.line_thickness == 3


def test_escape_and_quit_stop(pad):
    pad.handle_event(key(pygame.K_ESCAPE))
    assert pad.running is False
    other = ScratchPad()
    other.handle_event(pygame.event.Event(pygame.QUIT))
    assert other.running is False


def test_window_resize(pad):
    pad.handle_event(pygame.event.Event(pygame.VIDEORESIZE, w=800, h=400, size=(800, 400)))
    assert pad.window_size == (800, 400)


def test_render_background_and_line(pad):
    surface = pygame.Surface((100, 100))
    pad.points.add(10, 50, 2, True)
    pad.points.add(60, 50, 2, True)
    pad.render(surface)
    assert surface.get_at((90, 90))[:3] == (0, 0, 0)
    assert surface.get_at((30, 50))[:3] == (255, 255, 255)


def test_render_light_mode_background(pad):
    surface = pygame.Surface((50, 50))
    pad.handle_event(ctrl(pygame.K_d))
    pad.render(surface)
    assert surface.get_at((5, 5))[:3] == (255, 255, 255)


def test_render_text_draws_pixels(pad):
    surface = pygame.Surface((300, 100))
    xs, ys = range(16, 80), range(16, 40)
    pad.render(surface)
    assert lit_pixels(surface, xs, ys) == 0
    type_text(pad, "WWW")
    pad.render(surface)
    assert lit_pixels(surface, xs, ys) > 0


def test_save_image(pad):
    surface = pygame.Surface((40, 30))
    surface.fill((10, 20, 30))
    path = pad.save_image(surface)
    assert path.name == "__image__000.png"
    loaded = pygame.image.load(str(path))
    assert loaded.get_size() == (40, 30)
    assert loaded.get_at((3, 3))[:3] == (10, 20, 30)
    second = pad.save_image(surface)
    assert second != path and second.exists()


def test_ctrl_s_saves_screen(pad, tmp_path):
    pad.screen = pygame.Surface((20, 20))
    pad.screen.fill((40, 50, 60))
    pad.handle_event(ctrl(pygame.K_s))
    saved = sorted((tmp_path / "images").glob("*.png"))
    assert [p.name for p in saved] == ["__image__000.png"]
    loaded = pygame.image.load(str(saved[0]))
    assert loaded.get_size() == (20, 20)
    assert loaded.get_at((2, 2))[:3] == (40, 50, 60)


def test_main_help_exits():
    with pytest.raises(SystemExit) as info:
        main(["--help"])
    assert info.value.code == 0