"""Sign-in Screen: animated form demo.

Exercises glide, glide-tween, glide-motion, glide-form, and glide-signin.

Controls:
  Type     Edit the focused field
  Tab      Next field (Shift+Tab: previous)
  Click    Focus a field / press Submit
  Enter    Submit (or dismiss the notice)
  Esc      Dismiss the notice / quit
"""
from __future__ import annotations

import argparse
import sys

import pygame

from glide_signin import ScreenConfig, SigninScreen
from ui.constants import (
    BG_COLOR,
    FIELDS,
    FPS,
    MARKER_EXTENT,
    MARKER_MARGIN,
    SCREEN_H,
    SCREEN_W,
)
from ui.decor import draw_halo, draw_marker
from ui.fields import Layout, draw_button, draw_fields, draw_title
from ui.notice import Notice, draw_notice


def _log_signal(signal: str, data: dict) -> None:
    print(f"glide: {signal} {data}", file=sys.stderr)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Animated sign-in screen demo")
    parser.add_argument("--width", type=int, default=SCREEN_W)
    parser.add_argument("--height", type=int, default=SCREEN_H)
    parser.add_argument("--fps", type=int, default=FPS)
    parser.add_argument(
        "--verbose", action="store_true", help="print screen signals to stderr",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)

    pygame.init()
    window = pygame.display.set_mode((args.width, args.height))
    pygame.display.set_caption("Sign In - glide demo")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("sans", 17)
    title_font = pygame.font.SysFont("sans", 32, bold=True)

    notice = Notice()
    config = ScreenConfig(
        fps=args.fps, margin=MARKER_MARGIN, marker_extent=MARKER_EXTENT,
    )
    screen = SigninScreen((args.width, args.height), notice, config=config)
    if args.verbose:
        for signal in ("leg_complete", "pulse_turn", "submitted", "teardown"):
            screen.bus.subscribe(signal, _log_signal)
    handlers = [screen.on_change(name) for name, _ in FIELDS]
    layout = Layout(args.width)

    focus = 0
    screen.mount()
    running = True

    while running:
        elapsed_ms = clock.tick(args.fps)

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN and notice.visible:
                if event.key in (pygame.K_RETURN, pygame.K_KP_ENTER, pygame.K_ESCAPE):
                    notice.dismiss()

            elif event.type == pygame.KEYDOWN:
                name = FIELDS[focus][0]
                value = getattr(screen.inputs, name)
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_TAB:
                    step = -1 if event.mod & pygame.KMOD_SHIFT else 1
                    focus = (focus + step) % len(FIELDS)
                elif event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
                    screen.submit()
                elif event.key == pygame.K_BACKSPACE:
                    handlers[focus](value[:-1])
                elif event.unicode and event.unicode.isprintable():
                    handlers[focus](value + event.unicode)

            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                if notice.visible:
                    notice.dismiss()
                elif layout.button_rect().collidepoint(event.pos):
                    screen.submit()
                else:
                    clicked = layout.field_at(event.pos)
                    if clicked is not None:
                        focus = clicked

        # --- Frame ---
        screen.frame(elapsed_ms)
        decor = screen.decor()

        # --- Render ---
        window.fill(BG_COLOR)
        draw_marker(window, decor)
        draw_halo(window, layout.logo_center(), decor)
        draw_title(window, title_font, layout)
        draw_fields(window, font, layout, screen.inputs, focus)
        draw_button(window, font, layout)
        draw_notice(window, font, notice)

        pygame.display.flip()

    screen.teardown()
    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
