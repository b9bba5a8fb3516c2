"""Window application showing the suggestion input box."""

from __future__ import annotations

import argparse
from typing import Dict, List, Optional, Tuple

import pygame

from suggestbox.textinput import CHARACTER_SIZE, OUTLINE_THICKNESS, TextInput

DEFAULT_WORD_BANK = "5000-baby-girl-names.txt"
WINDOW_SIZE = (600, 760)
WINDOW_TITLE = "AutoCorrect Text Input"
BACKGROUND = (251, 198, 207)
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
SUGGESTION_SIZE = 20
SUGGESTION_SPACING = 25.0
SUGGESTION_GAP = 5.0

_FONT_FILES = {
    "futura": "Futura-Medium.ttf",
    "arial": "arial.ttf",
}

_fonts: Dict[Tuple[str, int], "pygame.font.Font"] = {}


def font_path(name: str) -> str:
    """Return the file name for a font name, or an empty string if unknown."""
    return _FONT_FILES.get(name, "")


def get_font(name: str, size: int) -> "pygame.font.Font":
    """Return a cached font, loading it on first use."""
    key = (name, size)
    if key not in _fonts:
        if not pygame.font.get_init():
            pygame.font.init()
        path = font_path(name)
        try:
            font = pygame.font.Font(path or None, size)
        except (OSError, FileNotFoundError):
            font = pygame.font.Font(None, size)
        _fonts[key] = font
    return _fonts[key]


def _render(surface: "pygame.Surface", box: TextInput) -> None:
    rect = pygame.Rect(int(box.box.x), int(box.box.y), int(box.box.width), int(box.box.height))
    pygame.draw.rect(surface, WHITE, rect)
    outline = rect.inflate(int(OUTLINE_THICKNESS * 2), int(OUTLINE_THICKNESS * 2))
    pygame.draw.rect(surface, BLACK, outline, int(OUTLINE_THICKNESS))

    font = get_font("futura", CHARACTER_SIZE)
    surface.blit(font.render(box.content, True, BLACK), (box.text_x, box.text_y))

    if not box.active:
        return

    if box.cursor.visible:
        prefix = box.content[: min(box.cursor.position, len(box.content))]
        cursor_x = box.text_x + font.size(prefix)[0] + 2
        cursor_rect = pygame.Rect(
            int(cursor_x), int(box.text_y), int(box.cursor.width), int(box.cursor.height)
        )
        pygame.draw.rect(surface, BLACK, cursor_rect)

    small = get_font("futura", SUGGESTION_SIZE)
    offset_y = box.box.y + box.box.height + SUGGESTION_GAP
    for suggestion in box.visible_suggestions():
        surface.blit(small.render(suggestion.word, True, BLACK), (box.box.x, offset_y))
        offset_y += SUGGESTION_SPACING


def _handle_event(event: "pygame.event.Event", box: TextInput) -> None:
    if event.type == pygame.TEXTINPUT:
        for ch in event.text:
            box.enter_text(ord(ch))
    elif event.type == pygame.MOUSEBUTTONDOWN:
        box.click(*event.pos)
    elif event.type == pygame.KEYDOWN:
        if event.key == pygame.K_BACKSPACE:
            box.enter_text(8)
        elif event.key == pygame.K_z and event.mod & (pygame.KMOD_CTRL | pygame.KMOD_META):
            box.undo()


def main(argv: Optional[List[str]] = None) -> int:
    """Open the window and run the input box until it is closed."""
    parser = argparse.ArgumentParser(description="Text box with word suggestions.")
    parser.add_argument("word_bank", nargs="?", default=DEFAULT_WORD_BANK)
    args = parser.parse_args(argv)

    box = TextInput(500, 40, 50, 250, args.word_bank)

    pygame.init()
    try:
        screen = pygame.display.set_mode(WINDOW_SIZE)
        pygame.display.set_caption(WINDOW_TITLE)
        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                _handle_event(event, box)
            box.update(clock.tick(60) / 1000.0)
            screen.fill(BACKGROUND)
            _render(screen, box)
            pygame.display.flip()
    finally:
        pygame.quit()
    return 0