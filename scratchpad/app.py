"""Interactive scratch pad: freehand drawing and typed notes on one canvas."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Callable, Optional

import pygame

from scratchpad.canvas import FONT_SIZE, WINDOW_HEIGHT, WINDOW_WIDTH, PointStore, line_pixels
from scratchpad.storage import DEFAULT_FOLDER, DEFAULT_PREFIX, unique_name
from scratchpad.text import Blinker, TextBuffer, format_for_display

Color = tuple[int, int, int, int]

WHITE: Color = (255, 255, 255, 255)
BLACK: Color = (0, 0, 0, 255)
INACTIVITY_TIMEOUT = 5000  # milliseconds before an idle cursor is hidden
PADDING = FONT_SIZE
WINDOW_TITLE = "Scratch Pad"


class ScratchPad:
    """State and behaviour of the scratch pad, independent of the main loop."""

    def __init__(self, font_path: Optional[str] = None,
                 folder: str | Path = DEFAULT_FOLDER) -> None:
        self.font_path = font_path
        self.folder = folder
        self.points = PointStore()
        self.text = TextBuffer()
        self.blinker = Blinker(700)
        self.ticks: Callable[[], int] = pygame.time.get_ticks

        self.running = True
        self.dark_mode = True
        self.is_drawing = False
        self.eraser_mode = False
        self.ctrl_a_pressed = False
        self.line_thickness = 2
        self.font_size = FONT_SIZE
        self.window_size = (WINDOW_WIDTH, WINDOW_HEIGHT)
        self.text_color: Color = WHITE
        self.background_color: Color = BLACK
        self.clipboard = ""
        self.cursor_visible = True
        self.last_activity = 0
        self.screen: Optional[pygame.Surface] = None
        self._font: Optional[pygame.font.Font] = None

    # -- display helpers -------------------------------------------------

    @staticmethod
    def _has_window() -> bool:
        return pygame.display.get_init() and pygame.display.get_surface() is not None

    def _show_cursor(self, visible: bool) -> None:
        self.cursor_visible = visible
        if self._has_window():
            pygame.mouse.set_visible(visible)

    def _set_cursor(self, cursor: int) -> None:
        if self._has_window():
            try:
                pygame.mouse.set_cursor(cursor)
            except pygame.error:
                pass

    def _set_clipboard(self, text: str) -> None:
        self.clipboard = text
        if not self._has_window():
            return
        try:
            if not pygame.scrap.get_init():
                pygame.scrap.init()
            pygame.scrap.put(pygame.SCRAP_TEXT, text.encode("utf-8"))
        except pygame.error:
            pass

    def _get_font(self) -> pygame.font.Font:
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font = pygame.font.Font(self.font_path, self.font_size)
        return self._font

    def _resize_font(self, delta: int) -> None:
        self.font_size += delta
        self._font = None

    # -- events ----------------------------------------------------------

    def handle_event(self, event: pygame.event.Event) -> None:
        """Update the pad's state from one input event."""
        kind = event.type
        if kind == pygame.QUIT:
            self.running = False
        elif kind == pygame.TEXTINPUT:
            if event.text:
                self.text.append(event.text[0])
            self._show_cursor(False)
        elif kind == pygame.WINDOWSIZECHANGED:
            self.window_size = (event.x, event.y)
        elif kind == pygame.VIDEORESIZE:
            self.window_size = (event.w, event.h)
        elif kind == pygame.KEYDOWN:
            self._handle_key(event.key, getattr(event, "mod", 0))
        elif kind == pygame.MOUSEBUTTONDOWN:
            if not self.eraser_mode and event.button == pygame.BUTTON_LEFT:
                self.is_drawing = True
                x, y = event.pos
                self.points.add(x, y, self.line_thickness, True)
                self._set_cursor(pygame.SYSTEM_CURSOR_CROSSHAIR)
        elif kind == pygame.MOUSEBUTTONUP:
            if not self.eraser_mode and event.button == pygame.BUTTON_LEFT:
                self.is_drawing = False
                x, y = event.pos
                self.points.add(x, y, self.line_thickness, False)
                self._set_cursor(pygame.SYSTEM_CURSOR_ARROW)
        elif kind == pygame.MOUSEMOTION:
            self.last_activity = self.ticks()
            if not self.cursor_visible:
                self._show_cursor(True)
            if not self.eraser_mode and self.is_drawing:
                x, y = event.pos
                self.points.add(x, y, self.line_thickness, True)
                self._set_cursor(pygame.SYSTEM_CURSOR_CROSSHAIR)

    def _handle_key(self, key: int, mod: int) -> None:
        if mod & pygame.KMOD_LCTRL:
            self._handle_ctrl_key(key)

        if key == pygame.K_KP_PLUS:
            self.line_thickness += 1
        elif key == pygame.K_KP_MINUS:
            self.line_thickness = max(0, self.line_thickness - 1)
        elif key == pygame.K_ESCAPE:
            self.running = False
        elif key == pygame.K_RETURN:
            self.text.append("\n")
        elif key == pygame.K_BACKSPACE:
            if self.ctrl_a_pressed:
                self.points.clear()
                self.text.clear()
                self.ctrl_a_pressed = False
            else:
                self.text.pop()
        elif key == pygame.K_TAB:
            self.text.append("\t")
        else:
            try:
                name = pygame.key.name(key)
            except pygame.error:
                name = ""
            print(f"Key code: {key} (0x{key:x}), name: {name}", flush=True)

    def _handle_ctrl_key(self, key: int) -> None:
        if key == pygame.K_x:
            if self.ctrl_a_pressed:
                self._set_clipboard(str(self.text))
                self.ctrl_a_pressed = False
                self.text.clear()
        elif key == pygame.K_d:
            self.text_color, self.background_color = self.background_color, self.text_color
            self.dark_mode = not self.dark_mode
        elif key == pygame.K_s:
            if self.screen is not None:
                self.save_image(self.screen)
            print("Image Saved...", flush=True)
        elif key == pygame.K_e:
            self.eraser_mode = not self.eraser_mode
        elif key == pygame.K_a:
            self.ctrl_a_pressed = not self.ctrl_a_pressed
        elif key == pygame.K_c:
            if self.ctrl_a_pressed:
                self._set_clipboard(str(self.text))
                self.ctrl_a_pressed = False
        elif key == pygame.K_KP_PLUS:
            self._resize_font(1)
        elif key == pygame.K_KP_MINUS:
            self._resize_font(-1)

    # -- drawing ---------------------------------------------------------

    def render(self, surface: pygame.Surface) -> None:
        """Draw the background, every stroke and the typed text onto surface."""
        surface.fill(self.background_color)
        self._render_strokes(surface)
        self.blinker.state(self.ticks())
        self._render_text(surface)

    def _render_strokes(self, surface: pygame.Surface) -> None:
        width, height = surface.get_size()
        r, g, b, a = self.text_color
        surface.lock()
        try:
            for first, second in self.points.segments():
                thickness = (first.line_thickness + first.line_thickness) // 2
                for x, y, intensity in line_pixels(first.x, first.y, second.x, second.y,
                                                   thickness):
                    if not (0 <= x < width and 0 <= y < height):
                        continue
                    alpha = int(a * min(max(intensity, 0.0), 1.0)) / 255
                    dr, dg, db, da = surface.get_at((x, y))
                    surface.set_at((x, y), (
                        round(r * alpha + dr * (1 - alpha)),
                        round(g * alpha + dg * (1 - alpha)),
                        round(b * alpha + db * (1 - alpha)),
                        da,
                    ))
        finally:
            surface.unlock()

    @staticmethod
    def _wrap(font: pygame.font.Font, text: str, max_width: int) -> list[str]:
        lines: list[str] = []
        for paragraph in text.split("\n"):
            if max_width <= 0 or font.size(paragraph)[0] <= max_width:
                lines.append(paragraph)
                continue
            current = ""
            for word in paragraph.split(" "):
                candidate = f"{current} {word}" if current else word
                if font.size(candidate)[0] <= max_width:
                    current = candidate
                    continue
                if current:
                    lines.append(current)
                current = ""
                for char in word:
                    if current and font.size(current + char)[0] > max_width:
                        lines.append(current)
                        current = ""
                    current += char
            lines.append(current)
        return lines

    def _render_text(self, surface: pygame.Surface) -> None:
        formatted = format_for_display(str(self.text), self.ctrl_a_pressed)
        if not formatted:
            return
        font = self._get_font()
        max_width = max(self.window_size[0] - 2 * PADDING, 0)
        txt_color, bg_color = self.text_color, self.background_color
        if self.ctrl_a_pressed:
            txt_color, bg_color = bg_color, txt_color

        lines = self._wrap(font, formatted, max_width)
        line_height = font.get_linesize()
        rendered = [font.render(line, True, txt_color) if line else None for line in lines]
        block_width = max((s.get_width() for s in rendered if s is not None), default=0)
        block = pygame.Surface((max(block_width, 1), line_height * len(lines)),
                               pygame.SRCALPHA)
        if self.ctrl_a_pressed:
            block.fill(bg_color)
        for index, line_surface in enumerate(rendered):
            if line_surface is not None:
                block.blit(line_surface, (0, index * line_height))
        surface.blit(block, (PADDING, PADDING))

    def save_image(self, surface: pygame.Surface) -> Optional[Path]:
        """Save surface as a PNG under a fresh name in the pad's folder."""
        path = unique_name(self.folder, DEFAULT_PREFIX)
        try:
            pygame.image.save(surface, str(path))
        except pygame.error as exc:
            print(f"Unable to save frame as PNG: {exc}", file=sys.stderr)
            return None
        return path

    # -- main loop -------------------------------------------------------

    def run(self) -> int:
        """Open the window and process events until the pad is closed."""
        pygame.init()
        try:
            self.screen = pygame.display.set_mode(
                (WINDOW_WIDTH, WINDOW_HEIGHT), pygame.RESIZABLE | pygame.NOFRAME
            )
            pygame.display.set_caption(WINDOW_TITLE)
            self.window_size = self.screen.get_size()
            try:
                self._get_font()
            except (pygame.error, OSError) as exc:
                print(f"Font loading failed: {exc}")
                return 1

            pygame.key.start_text_input()
            self._set_cursor(pygame.SYSTEM_CURSOR_ARROW)
            self._show_cursor(True)
            self.last_activity = self.ticks()
            clock = pygame.time.Clock()

            while self.running:
                if self.cursor_visible and self.ticks() - self.last_activity > INACTIVITY_TIMEOUT:
                    self._show_cursor(False)
                for event in pygame.event.get():
                    self.handle_event(event)
                    if event.type in (pygame.VIDEORESIZE, pygame.WINDOWSIZECHANGED):
                        self.screen = pygame.display.get_surface()
                self.render(self.screen)
                pygame.display.flip()
                clock.tick(60)

            pygame.key.stop_text_input()
            return 0
        finally:
            self._font = None
            self.screen = None
            pygame.quit()


def main(argv: Optional[list[str]] = None) -> int:
    """Start the scratch pad."""
    parser = argparse.ArgumentParser(prog="scratchpad", description="Draw and type notes.")
    parser.add_argument("--font", default=None, help="TrueType font file for text")
    parser.add_argument("--folder", default=DEFAULT_FOLDER,
                        help="folder where saved images are written")
    args = parser.parse_args(argv)
    try:
        return ScratchPad(args.font, args.folder).run()
    except pygame.error as exc:
        print(f"SDL could not initialize! SDL_Error: {exc}")
        return 1


if __name__ == "__main__":
    sys.exit(main())