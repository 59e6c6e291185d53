"""Moving marker and pulsing halo renderers."""
from __future__ import annotations

import math

import pygame

from glide_signin import DecorFrame
from ui.constants import ACCENT, CIRCLE_SIZE


def draw_marker(surface: pygame.Surface, decor: DecorFrame) -> None:
    """Draw the translucent marker at its waypoint-relative position.

    A dot on the rim makes the rotation visible.
    """
    radius = CIRCLE_SIZE // 2
    layer = pygame.Surface((CIRCLE_SIZE, CIRCLE_SIZE), pygame.SRCALPHA)
    pygame.draw.circle(layer, (*ACCENT, 77), (radius, radius), radius)

    angle = math.radians(decor.rotation)
    rim = (
        radius + int((radius - 12) * math.cos(angle)),
        radius + int((radius - 12) * math.sin(angle)),
    )
    pygame.draw.circle(layer, (*ACCENT, 200), rim, 8)

    x, y = decor.position
    surface.blit(layer, (int(x), int(y)))


def draw_halo(surface: pygame.Surface, center: tuple[int, int], decor: DecorFrame) -> None:
    """Draw the logo and its pulsing ring, both scaled by the pulse."""
    radius = int(CIRCLE_SIZE / 2 * decor.scale)
    size = radius * 2 + 8
    layer = pygame.Surface((size, size), pygame.SRCALPHA)
    alpha = int(255 * decor.opacity)
    pygame.draw.circle(layer, (*ACCENT, alpha), (size // 2, size // 2), radius, 4)
    surface.blit(layer, (center[0] - size // 2, center[1] - size // 2))

    logo_r = int((CIRCLE_SIZE / 2 - 10) * decor.scale)
    pygame.draw.circle(surface, ACCENT, center, logo_r)
    pygame.draw.circle(surface, (255, 255, 255), center, logo_r // 3)
