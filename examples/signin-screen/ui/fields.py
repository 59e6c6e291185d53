"""Form field and submit button renderers."""
from __future__ import annotations

from dataclasses import dataclass

import pygame

from glide_form import FormInputs
from ui.constants import (
    ACCENT,
    BUTTON_H,
    BUTTON_TEXT,
    BUTTON_W,
    CIRCLE_SIZE,
    FIELD_BG,
    FIELD_GAP,
    FIELD_H,
    FIELDS,
    FORM_TOP,
    FORM_W,
    TEXT_COLOR,
    TEXT_DIM,
)

TITLE_Y = FORM_TOP + CIRCLE_SIZE + 30
FIELDS_Y = TITLE_Y + 70


@dataclass(frozen=True)
class Layout:
    """Form geometry for a window of the given width, centred horizontally."""

    width: int

    @property
    def form_w(self) -> int:
        return max(0, min(FORM_W, self.width - 40))

    @property
    def form_x(self) -> int:
        return (self.width - self.form_w) // 2

    def logo_center(self) -> tuple[int, int]:
        return self.width // 2, FORM_TOP + CIRCLE_SIZE // 2

    def field_rect(self, index: int) -> pygame.Rect:
        y = FIELDS_Y + index * (FIELD_H + FIELD_GAP)
        return pygame.Rect(self.form_x, y, self.form_w, FIELD_H)

    def button_rect(self) -> pygame.Rect:
        y = FIELDS_Y + len(FIELDS) * (FIELD_H + FIELD_GAP) + 10
        return pygame.Rect((self.width - BUTTON_W) // 2, y, BUTTON_W, BUTTON_H)

    def field_at(self, pos: tuple[int, int]) -> int | None:
        for i in range(len(FIELDS)):
            if self.field_rect(i).collidepoint(pos):
                return i
        return None


def draw_title(surface: pygame.Surface, font: pygame.font.Font, layout: Layout) -> None:
    label = font.render("SIGN IN", True, TEXT_COLOR)
    surface.blit(label, (layout.width // 2 - label.get_width() // 2, TITLE_Y))


def draw_fields(
    surface: pygame.Surface,
    font: pygame.font.Font,
    layout: Layout,
    inputs: FormInputs,
    focus: int,
) -> None:
    for i, (name, placeholder) in enumerate(FIELDS):
        rect = layout.field_rect(i)
        pygame.draw.rect(surface, FIELD_BG, rect, border_radius=18)
        border = 3 if i == focus else 2
        pygame.draw.rect(surface, ACCENT, rect, border, border_radius=18)

        value = getattr(inputs, name)
        if name == "password":
            value = "*" * len(value)
        if value:
            text = font.render(value, True, TEXT_COLOR)
        else:
            text = font.render(placeholder, True, TEXT_DIM)
        surface.blit(text, (rect.x + 20, rect.centery - text.get_height() // 2))


def draw_button(surface: pygame.Surface, font: pygame.font.Font, layout: Layout) -> None:
    rect = layout.button_rect()
    pygame.draw.rect(surface, ACCENT, rect, border_radius=26)
    label = font.render("SUBMIT", True, BUTTON_TEXT)
    surface.blit(label, (rect.centerx - label.get_width() // 2,
                         rect.centery - label.get_height() // 2))
