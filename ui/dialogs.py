"""Dialog utilities for the UI layer."""

import pygame
import sys

from core.models import Race, make_character


def select_race(screen, font, output_font, width, height):
    """Display a race selection dialog and return the chosen :class:`Race`."""
    races = list(Race)
    dialog_w, dialog_h = 760, 120 + 60 * len(races)
    dialog_x = (width - dialog_w) // 2
    dialog_y = (height - dialog_h) // 2
    dialog_rect = pygame.Rect(dialog_x, dialog_y, dialog_w, dialog_h)
    pygame.draw.rect(screen, (30, 30, 60), dialog_rect, border_radius=18)
    pygame.draw.rect(screen, (200, 200, 255), dialog_rect, 4, border_radius=18)
    title = font.render("Choose Your Race", True, (255, 255, 255))
    screen.blit(title, (dialog_x + dialog_w // 2 - title.get_width() // 2, dialog_y + 24))
    btn_rects = []
    for i, race in enumerate(races):
        rect = pygame.Rect(dialog_x + 24, dialog_y + 80 + i * 60, dialog_w - 48, 48)
        pygame.draw.rect(screen, (60, 60, 120), rect, border_radius=12)
        pygame.draw.rect(screen, (120, 120, 200), rect, 2, border_radius=12)
        stats = make_character(race.value, race).describe()
        label = output_font.render(f"{i + 1}. {stats}", True, (255, 255, 255))
        screen.blit(label, (rect.x + 12, rect.centery - label.get_height() // 2))
        btn_rects.append(rect)
    pygame.display.flip()
    while True:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                pygame.quit()
                sys.exit()
            if event.type == pygame.KEYDOWN and event.unicode.isdigit():
                idx = int(event.unicode) - 1
                if 0 <= idx < len(races):
                    return races[idx]
            if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                mx, my = pygame.mouse.get_pos()
                for i, rect in enumerate(btn_rects):
                    if rect.collidepoint(mx, my):
                        return races[i]


def game_over_dialog(screen, font, output_font, width, height, won=False):
    """Display a game over dialog and return the chosen action."""
    dialog_w, dialog_h = 480, 220
    dialog_x = (width - dialog_w) // 2
    dialog_y = (height - dialog_h) // 2
    dialog_rect = pygame.Rect(dialog_x, dialog_y, dialog_w, dialog_h)
    pygame.draw.rect(screen, (0, 40, 0) if won else (40, 0, 0), dialog_rect, border_radius=18)
    pygame.draw.rect(screen, (80, 220, 120) if won else (255, 80, 80), dialog_rect, 4, border_radius=18)
    title = font.render("Victory!" if won else "Game Over!", True, (255, 255, 255))
    screen.blit(title, (dialog_x + dialog_w // 2 - title.get_width() // 2, dialog_y + 32))
    text = "You defeated every enemy." if won else "You have perished on the board."
    msg = output_font.render(text, True, (255, 230, 230))
    screen.blit(msg, (dialog_x + dialog_w // 2 - msg.get_width() // 2, dialog_y + 80))
    btns = []
    btn_labels = ["Play Again", "Exit"]
    for i, label in enumerate(btn_labels):
        btn_w, btn_h = 180, 48
        btn_rect = pygame.Rect(dialog_x + 40 + i * 220, dialog_y + dialog_h - btn_h - 32, btn_w, btn_h)
        pygame.draw.rect(screen, (60, 60, 120), btn_rect, border_radius=12)
        pygame.draw.rect(screen, (120, 120, 200), btn_rect, 2, border_radius=12)
        btn_txt = font.render(label, True, (255, 255, 255))
        screen.blit(btn_txt, (btn_rect.centerx - btn_txt.get_width() // 2, btn_rect.centery - btn_txt.get_height() // 2))
        btns.append((btn_rect, label))
    pygame.display.flip()
    while True:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                pygame.quit()
                sys.exit()
            if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                mx, my = pygame.mouse.get_pos()
                for btn_rect, label in btns:
                    if btn_rect.collidepoint(mx, my):
                        return label
