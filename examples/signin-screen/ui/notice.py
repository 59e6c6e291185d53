"""Modal notice: the demo's notifier and its renderer."""
from __future__ import annotations

import pygame

from ui.constants import (
    NOTICE_BG,
    NOTICE_ERROR,
    NOTICE_OK,
    TEXT_COLOR,
    TEXT_DIM,
)


class Notice:
    """Holds the most recent (title, message) until dismissed."""

    def __init__(self) -> None:
        self.title: str | None = None
        self.message: str = ""

    def __call__(self, title: str, message: str) -> None:
        self.title = title
        self.message = message

    @property
    def visible(self) -> bool:
        return self.title is not None

    def dismiss(self) -> None:
        self.title = None
        self.message = ""


def _wrap(font: pygame.font.Font, text: str, width: int) -> list[str]:
    lines: list[str] = []
    for paragraph in text.split("\n"):
        current = ""
        for word in paragraph.split(" "):
            candidate = f"{current} {word}".strip()
            if current and font.size(candidate)[0] > width:
                lines.append(current)
                current = word
            else:
                current = candidate
        lines.append(current)
    return lines


def draw_notice(surface: pygame.Surface, font: pygame.font.Font, notice: Notice) -> None:
    if not notice.visible:
        return
    width, height = surface.get_size()
    shade = pygame.Surface((width, height), pygame.SRCALPHA)
    shade.fill((0, 0, 0, 150))
    surface.blit(shade, (0, 0))

    w = max(120, width - 60)
    lines = _wrap(font, notice.message, w - 32)
    line_h = font.get_linesize()
    h = 90 + line_h * len(lines)
    rect = pygame.Rect((width - w) // 2, height // 2 - h // 2, w, h)
    pygame.draw.rect(surface, NOTICE_BG, rect, border_radius=12)

    color = NOTICE_OK if notice.title == "Success" else NOTICE_ERROR
    surface.blit(font.render(notice.title, True, color), (rect.x + 16, rect.y + 14))
    y = rect.y + 20 + line_h
    for line in lines:
        surface.blit(font.render(line, True, TEXT_COLOR), (rect.x + 16, y))
        y += line_h

    hint = font.render("[Enter] OK", True, TEXT_DIM)
    surface.blit(hint, (rect.right - hint.get_width() - 16, rect.bottom - line_h - 10))
