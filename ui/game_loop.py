def run(name="Player", width=None, height=None, seed=None):
    import logging
    import random
    import sys

    import pygame

    from adventure_cli import handle_command
    from core import config
    from core.game import new_game
    from ui.dialogs import select_race, game_over_dialog

    logger = logging.getLogger(__name__)

    grid_w = width or config.GRID_W
    grid_h = height or config.GRID_H
    seed = config.SEED if seed is None else seed

    # --- Pygame Setup ---
    pygame.init()
    CELL_SIZE = config.CELL_SIZE
    STATUS_BAR_HEIGHT = config.STATUS_BAR_HEIGHT
    STATS_PANEL_WIDTH = config.STATS_PANEL_WIDTH
    board_px_w, board_px_h = CELL_SIZE * grid_w, CELL_SIZE * grid_h
    WIDTH = max(board_px_w + 40 + STATS_PANEL_WIDTH, 820)
    HEIGHT = max(board_px_h + 40, 420) + config.LOG_HEIGHT + STATUS_BAR_HEIGHT
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption("Grid Adventure")
    font = pygame.font.SysFont(None, 36)
    output_font = pygame.font.SysFont(None, 24)
    symbol_font = pygame.font.SysFont(None, CELL_SIZE - 8)
    clock = pygame.time.Clock()

    stats_panel = pygame.Rect(board_px_w + 40, 0, STATS_PANEL_WIDTH, HEIGHT - STATUS_BAR_HEIGHT)
    log_area = pygame.Rect(0, HEIGHT - STATUS_BAR_HEIGHT - config.LOG_HEIGHT, stats_panel.left - 8, config.LOG_HEIGHT)
    status_bar = pygame.Rect(0, HEIGHT - STATUS_BAR_HEIGHT, WIDTH, STATUS_BAR_HEIGHT)

    def start_game():
        screen.fill(config.BLACK)
        race = select_race(screen, font, output_font, WIDTH, HEIGHT)
        rng = random.Random(seed) if seed is not None else None
        g = new_game(name, race, width=grid_w, height=grid_h, rng=rng, reseed=config.LEGACY_RESEED and rng is None)
        logger.info("GUI game started as %s", race.value)
        g.note("You selected: " + g.player.describe())
        return g

    game = start_game()
    # Pending drop input: None, "slot" (waiting for 1-4) or "ring" (waiting for ring number)
    drop_mode = None

    def draw():
        screen.fill(config.NIGHT_TINT if game.clock.is_night else config.BLACK)
        board = game.board
        for r in range(board.height):
            for c in range(board.width):
                rect = pygame.Rect(20 + c * CELL_SIZE, 20 + r * CELL_SIZE, CELL_SIZE - 4, CELL_SIZE - 4)
                sq = board.square(r, c)
                pygame.draw.rect(screen, config.GRAY, rect, border_radius=8)
                pygame.draw.rect(screen, config.CELL_BORDER, rect, 1, border_radius=8)
                if sq.player:
                    mark, color = "#", config.BLUE
                elif sq.enemy is not None:
                    mark, color = "*", config.RED
                elif sq.item is not None:
                    mark, color = "+", config.YELLOW
                else:
                    continue
                txt = symbol_font.render(mark, True, color)
                screen.blit(txt, (rect.centerx - txt.get_width() // 2, rect.centery - txt.get_height() // 2))

        # Stats panel
        pygame.draw.rect(screen, (30, 30, 45), stats_panel, border_radius=12)
        y = stats_panel.y + 16
        player = game.player
        lines = [
            player.name,
            f"Race: {player.race.value}",
            f"Attack: {player.total_attack}",
            f"Defence: {player.total_defence}",
            f"Health: {player.total_health}",
            f"Strength: {player.total_strength}",
            f"Gold: {game.gold}",
            f"Time: {game.clock.label}",
            "",
        ] + player.describe_equipment()
        for line in lines:
            txt = output_font.render(line, True, config.WHITE)
            screen.blit(txt, (stats_panel.x + 16, y))
            y += 26

        # Message log
        pygame.draw.rect(screen, (20, 20, 20), log_area, border_radius=12)
        pygame.draw.rect(screen, config.CELL_BORDER, log_area, 2, border_radius=12)
        max_lines = (log_area.height - 16) // 24
        for i, line in enumerate(list(game.log)[-max_lines:]):
            txt = output_font.render(line, True, (255, 255, 180))
            screen.blit(txt, (log_area.x + 16, log_area.y + 8 + i * 24))

        # Status bar
        pygame.draw.rect(screen, (40, 40, 60), status_bar)
        if drop_mode == "slot":
            hint = "Drop what? 1=Weapon 2=Armour 3=Shield 4=Ring (Esc cancels)"
        elif drop_mode == "ring":
            hint = "Which ring? Press its number (Esc cancels)"
        else:
            hint = "w/a/s/d move  g pickup  j attack  h drop  k look  l inventory  x exit"
        txt = output_font.render(hint, True, config.WHITE)
        screen.blit(txt, (status_bar.x + 12, status_bar.centery - txt.get_height() // 2))
        pygame.display.flip()

    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                key = event.unicode.lower()
                if event.key == pygame.K_ESCAPE:
                    drop_mode = None
                    continue
                if drop_mode == "slot":
                    if key in {"1", "2", "3"} or (key == "4" and not game.player.rings):
                        handle_command(f"h {key}", game)
                        drop_mode = None
                    elif key == "4":
                        game.drop("ring")
                        drop_mode = "ring"
                    continue
                if drop_mode == "ring":
                    if key.isdigit():
                        handle_command(f"h 4 {key}", game)
                        drop_mode = None
                    continue
                if key == "h":
                    drop_mode = "slot"
                elif key:
                    handle_command(key, game)
                    game.note(game.status()[0])
        draw()
        if game.over:
            if game.player.is_defeated or game.won:
                choice = game_over_dialog(screen, font, output_font, WIDTH, HEIGHT, won=game.won)
                if choice == "Play Again":
                    game = start_game()
                    drop_mode = None
                    continue
            running = False
        clock.tick(30)
    pygame.quit()
    sys.exit()
