"""Window, drawing and input loop of the game."""

from __future__ import annotations

import argparse
import os
from pathlib import Path
from typing import Optional, Sequence

from .flow import WINDOW_CLEAR_COLOR, WINDOW_TITLE, Breakout
from .geometry import Vec2
from .menu import BUTTON_HEIGHT, PANEL_COLOR, TEXT_COLOR, TITLE, Button, Interaction
from .splash import SPLASH_IMAGE
from .states import GameState, MainMenuState

WINDOW_SIZE = (1280, 720)
FRAME_RATE = 60

HUD_LABEL = "Score: "
HUD_FONT_SIZE = 33
HUD_SCORE_TEXT_COLOR = (1.0, 0.5, 0.5)
HUD_TEXT_COLOR = (0.5, 0.5, 1.0)
HUD_TEXT_PADDING = 9

BUTTON_MARGIN = 20.0
BUTTON_FONT_SIZE = 33
TITLE_FONT_SIZE = 67
ICON_LEFT = 10
ICON_WIDTH = 30
SPLASH_IMAGE_WIDTH = 200

COLLISION_SOUND = "Kenney/impact_sounds/footstep_concrete_002.ogg"

Rect = tuple[float, float, float, float]


def world_to_screen(point: Vec2, screen_size: tuple[int, int]) -> tuple[float, float]:
    """Map a world point (origin at centre, y up) to screen pixels (origin top left, y down)."""
    width, height = screen_size
    return (width / 2.0 + point.x, height / 2.0 - point.y)


def hud_text(score: int) -> str:
    """The text the heads-up display shows for ``score``."""
    return f"{HUD_LABEL}{score}"


def layout_buttons(
    buttons: Sequence[Button], screen_size: tuple[int, int]
) -> list[tuple[Button, Rect]]:
    """Place buttons in centred rows: volume buttons share one row, others get their own."""
    rows: list[list[Button]] = []
    volume_row: list[Button] = []
    for button in buttons:
        if button.volume is not None:
            if not volume_row:
                rows.append(volume_row)
            volume_row.append(button)
        else:
            rows.append([button])

    width, height = screen_size
    row_heights = [max(b.height for b in row) + 2 * BUTTON_MARGIN for row in rows]
    top = (height - sum(row_heights)) / 2.0
    placed: list[tuple[Button, Rect]] = []
    for row, row_height in zip(rows, row_heights):
        row_width = sum(b.width + 2 * BUTTON_MARGIN for b in row)
        left = (width - row_width) / 2.0
        for button in row:
            placed.append(
                (button, (left + BUTTON_MARGIN, top + BUTTON_MARGIN, button.width, button.height))
            )
            left += button.width + 2 * BUTTON_MARGIN
        top += row_height
    return placed


def _rgb(color: tuple[float, float, float]) -> tuple[int, int, int]:
    return tuple(round(channel * 255) for channel in color)  # type: ignore[return-value]


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the game window and run until it is closed or Quit is chosen."""
    parser = argparse.ArgumentParser(prog="breakoutxt", description=WINDOW_TITLE)
    parser.add_argument(
        "--assets", type=Path, default=Path("assets"), help="directory holding images and sounds"
    )
    args = parser.parse_args(argv)

    os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
    import pygame

    pygame.init()
    screen = pygame.display.set_mode(WINDOW_SIZE)
    pygame.display.set_caption(WINDOW_TITLE)
    screen_size = screen.get_size()

    images: dict[str, Optional["pygame.Surface"]] = {}

    def image(name: str) -> Optional["pygame.Surface"]:
        if name not in images:
            path = args.assets / name
            try:
                images[name] = pygame.image.load(str(path)).convert_alpha() if path.is_file() else None
            except pygame.error:
                images[name] = None
        return images[name]

    def scaled(surface: "pygame.Surface", width: int) -> "pygame.Surface":
        ratio = width / surface.get_width()
        return pygame.transform.smoothscale(surface, (width, max(1, round(surface.get_height() * ratio))))

    collision_sound = None
    sound_path = args.assets / COLLISION_SOUND
    try:
        pygame.mixer.init()
        if sound_path.is_file():
            collision_sound = pygame.mixer.Sound(str(sound_path))
    except pygame.error:
        collision_sound = None

    hud_font = pygame.font.Font(None, HUD_FONT_SIZE)
    button_font = pygame.font.Font(None, BUTTON_FONT_SIZE)
    title_font = pygame.font.Font(None, TITLE_FONT_SIZE)

    breakout = Breakout()
    clock = pygame.time.Clock()
    running = True

    def draw_body(body, color) -> None:
        bounds = body.bounds()
        left, top = world_to_screen(Vec2(bounds.min.x, bounds.max.y), screen_size)
        pygame.draw.rect(
            screen, _rgb(color), pygame.Rect(round(left), round(top), round(body.size.x), round(body.size.y))
        )

    def draw_game() -> None:
        session = breakout.session
        if session is None:
            return
        for body in (*session.walls, *session.bricks, session.paddle):
            draw_body(body, body.color)
        center = world_to_screen(session.ball.position, screen_size)
        radius = round(session.ball.size.x / 2.0)
        pygame.draw.circle(screen, _rgb(session.ball.color), (round(center[0]), round(center[1])), radius)

        text = hud_text(session.score)
        label = hud_font.render(text[: len(HUD_LABEL)], True, _rgb(HUD_TEXT_COLOR))
        value = hud_font.render(text[len(HUD_LABEL):], True, _rgb(HUD_SCORE_TEXT_COLOR))
        screen.blit(label, (HUD_TEXT_PADDING, HUD_TEXT_PADDING))
        screen.blit(value, (HUD_TEXT_PADDING + label.get_width(), HUD_TEXT_PADDING))

    def draw_menu(layout, mouse_pos, mouse_down) -> None:
        if not layout:
            return
        rects = [pygame.Rect(*(round(v) for v in rect)) for _, rect in layout]
        panel = rects[0].unionall(rects[1:]).inflate(2 * BUTTON_MARGIN, 2 * BUTTON_MARGIN)
        title = None
        if breakout.menu.state is MainMenuState.MAIN_MENU:
            title = title_font.render(TITLE, True, _rgb(TEXT_COLOR))
            panel.top -= title.get_height() + 2 * BUTTON_MARGIN
            panel.height += title.get_height() + 2 * BUTTON_MARGIN
            panel.width = max(panel.width, title.get_width() + 4 * BUTTON_MARGIN)
            panel.centerx = screen_size[0] // 2
        volume_label = None
        if breakout.menu.state is MainMenuState.SETTINGS:
            volume_label = button_font.render("Volume", True, _rgb(TEXT_COLOR))
            panel.left -= volume_label.get_width() + BUTTON_MARGIN
            panel.width += volume_label.get_width() + BUTTON_MARGIN
        pygame.draw.rect(screen, _rgb(PANEL_COLOR), panel)
        if title is not None:
            screen.blit(title, title.get_rect(midtop=(panel.centerx, panel.top + BUTTON_MARGIN)))

        for (button, _), rect in zip(layout, rects):
            if rect.collidepoint(mouse_pos):
                interaction = Interaction.PRESSED if mouse_down else Interaction.HOVERED
            else:
                interaction = Interaction.NONE
            pygame.draw.rect(screen, _rgb(button.color(interaction)), rect)
            if button.icon:
                icon = image(button.icon)
                if icon is not None:
                    icon = scaled(icon, ICON_WIDTH)
                    screen.blit(icon, icon.get_rect(midleft=(rect.left + ICON_LEFT, rect.centery)))
            if button.label:
                text = button_font.render(button.label, True, _rgb(TEXT_COLOR))
                screen.blit(text, text.get_rect(center=rect.center))
            if volume_label is not None and button.volume == 0:
                screen.blit(
                    volume_label,
                    volume_label.get_rect(midright=(rect.left - BUTTON_MARGIN, rect.centery)),
                )

    def draw_splash() -> None:
        icon = image(SPLASH_IMAGE)
        if icon is not None:
            icon = scaled(icon, SPLASH_IMAGE_WIDTH)
            screen.blit(icon, icon.get_rect(center=(screen_size[0] // 2, screen_size[1] // 2)))

    while running and not breakout.quit_requested:
        dt = clock.tick(FRAME_RATE) / 1000.0
        layout = (
            layout_buttons(breakout.menu.buttons(), screen_size)
            if breakout.state is GameState.MAIN_MENU
            else []
        )

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1 and layout:
                for button, rect in layout:
                    if pygame.Rect(*(round(v) for v in rect)).collidepoint(event.pos):
                        if button.action is not None:
                            breakout.press(button.action)
                        elif button.volume is not None:
                            breakout.select_volume(button.volume)
                        break

        keys = pygame.key.get_pressed()
        collided = breakout.update(dt, bool(keys[pygame.K_LEFT]), bool(keys[pygame.K_RIGHT]))
        if collided and collision_sound is not None:
            collision_sound.play()

        screen.fill(_rgb(WINDOW_CLEAR_COLOR))
        if breakout.state is GameState.SPLASH_SCREEN:
            draw_splash()
        elif breakout.state is GameState.GAME:
            draw_game()
        else:
            layout = layout_buttons(breakout.menu.buttons(), screen_size)
            draw_menu(layout, pygame.mouse.get_pos(), pygame.mouse.get_pressed()[0])
        pygame.display.flip()

    pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())