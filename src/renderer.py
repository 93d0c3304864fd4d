"""
Pygame renderer for the game.

Paints the engine's render() snapshot as colored boxes and a sidebar with
score, cleared lines, and status text. It only reads from the game; all
changes go through the game's commands.
"""

from __future__ import annotations

try:
    import pygame
except ImportError:
    pygame = None  # type: ignore[assignment]

from src.game.board import EMPTY
from src.game.pieces import COLOR_RGB
from src.game.tetris import TetrisGame


# ── Color constants ───────────────────────────────────────────────────────
BACKGROUND_COLOR = (30, 30, 30)
GRID_LINE_COLOR = (60, 60, 60)
BORDER_COLOR = (200, 200, 200)
TEXT_COLOR = (255, 255, 255)
GAME_OVER_COLOR = (255, 50, 50)
SIDEBAR_BG_COLOR = (20, 20, 20)
EMPTY_CELL_COLOR = (40, 40, 40)


class TetrisRenderer:
    """Pygame-based renderer for a TetrisGame.

    The window is divided into:
      - Left: board area (cell_size * width) x (cell_size * height)
      - Right: sidebar with score, lines, status, and controls

    Attributes:
        game: Reference to the TetrisGame being rendered.
        cell_size: Pixel size of each grid cell.
        board_pixel_width: Pixel width of the board area.
        board_pixel_height: Pixel height of the board area.
        sidebar_width: Pixel width of the sidebar.
        screen: Pygame display surface (created on first render).
    """

    SIDEBAR_WIDTH_CELLS: int = 7  # sidebar width in cell units

    def __init__(self, game: TetrisGame, cell_size: int = 30) -> None:
        """Initialize the renderer.

        Does NOT create the Pygame window yet — that happens on the first
        call to render().

        Args:
            game: The TetrisGame instance to render.
            cell_size: Size of each grid cell in pixels.
        """
        if pygame is None:
            raise ImportError("pygame is required for rendering. Install it: pip install pygame")

        self.game = game
        self.cell_size = cell_size

        self.board_pixel_width = cell_size * game.board.width
        self.board_pixel_height = cell_size * game.board.height
        self.sidebar_width = cell_size * self.SIDEBAR_WIDTH_CELLS
        self.window_width = self.board_pixel_width + self.sidebar_width
        self.window_height = self.board_pixel_height

        self.screen: pygame.Surface | None = None
        self._clock: pygame.time.Clock | None = None
        self._font: pygame.font.Font | None = None
        self._initialized: bool = False

    def render(self, fps: int = 60) -> int:
        """Draw the current game state and wait for the next frame.

        Args:
            fps: Target frames per second for the display clock.

        Returns:
            Milliseconds elapsed since the previous frame.
        """
        if not self._initialized:
            self._init_pygame()

        self.screen.fill(BACKGROUND_COLOR)
        self._draw_board()
        self._draw_sidebar()

        pygame.draw.rect(
            self.screen,
            BORDER_COLOR,
            (0, 0, self.board_pixel_width, self.board_pixel_height),
            2,
        )

        if self.game.game_over:
            self._draw_banner("GAME OVER", "Press Enter to play again", GAME_OVER_COLOR)
        elif not self.game.game_started:
            self._draw_banner("TETRIS", "Press Enter to start")
        elif self.game.is_paused:
            self._draw_banner("PAUSED", "Press Space to resume")

        pygame.display.flip()
        return self._clock.tick(fps)

    def _init_pygame(self) -> None:
        pygame.init()
        self.screen = pygame.display.set_mode((self.window_width, self.window_height))
        pygame.display.set_caption("Tetris")
        self._clock = pygame.time.Clock()
        self._font = pygame.font.SysFont("monospace", 20)
        self._small_font = pygame.font.SysFont("monospace", 14)
        self._initialized = True

    def _draw_board(self) -> None:
        """Draw settled cells and the falling piece from the render() snapshot."""
        grid = self.game.render()
        for row in range(grid.shape[0]):
            for col in range(grid.shape[1]):
                cell_value = int(grid[row, col])
                x = col * self.cell_size
                y = row * self.cell_size

                if cell_value != EMPTY:
                    color = COLOR_RGB.get(cell_value, (128, 128, 128))
                    pygame.draw.rect(
                        self.screen, color, (x, y, self.cell_size, self.cell_size)
                    )
                    # Slightly darker border for 3D effect
                    darker = tuple(max(0, c - 40) for c in color)
                    pygame.draw.rect(
                        self.screen, darker, (x, y, self.cell_size, self.cell_size), 1
                    )
                else:
                    pygame.draw.rect(
                        self.screen, EMPTY_CELL_COLOR, (x, y, self.cell_size, self.cell_size)
                    )
                    pygame.draw.rect(
                        self.screen, GRID_LINE_COLOR, (x, y, self.cell_size, self.cell_size), 1
                    )

    def _draw_sidebar(self) -> None:
        sidebar_x = self.board_pixel_width
        pygame.draw.rect(
            self.screen,
            SIDEBAR_BG_COLOR,
            (sidebar_x, 0, self.sidebar_width, self.window_height),
        )
        pygame.draw.line(
            self.screen,
            BORDER_COLOR,
            (sidebar_x, 0),
            (sidebar_x, self.window_height),
            2,
        )

        text_x = sidebar_x + 15
        text_y = 20

        self._draw_text("SCORE", text_x, text_y)
        self._draw_text(str(self.game.score), text_x, text_y + 25)

        text_y += 65
        self._draw_text("LINES", text_x, text_y)
        self._draw_text(str(self.game.total_lines), text_x, text_y + 25)

        text_y += 90
        for line in (
            "Left/Right: move",
            "Down: drop",
            "Space: pause",
            "Enter: new game",
            "Esc: quit",
        ):
            surface = self._small_font.render(line, True, BORDER_COLOR)
            self.screen.blit(surface, (text_x, text_y))
            text_y += 20

    def _draw_banner(
        self,
        title: str,
        subtitle: str,
        color: tuple[int, int, int] = TEXT_COLOR,
    ) -> None:
        """Draw a semi-transparent overlay with a title over the board."""
        overlay = pygame.Surface(
            (self.board_pixel_width, self.board_pixel_height), pygame.SRCALPHA
        )
        overlay.fill((0, 0, 0, 150))
        self.screen.blit(overlay, (0, 0))

        font_large = pygame.font.SysFont("monospace", 36, bold=True)
        text_title = font_large.render(title, True, color)
        text_sub = self._small_font.render(subtitle, True, TEXT_COLOR)

        cx = self.board_pixel_width // 2
        cy = self.board_pixel_height // 2
        self.screen.blit(text_title, (cx - text_title.get_width() // 2, cy - 40))
        self.screen.blit(text_sub, (cx - text_sub.get_width() // 2, cy + 10))

    def _draw_text(self, text: str, x: int, y: int, color: tuple[int, int, int] = TEXT_COLOR) -> None:
        surface = self._font.render(text, True, color)
        self.screen.blit(surface, (x, y))

    def close(self) -> None:
        """Shut down Pygame and close the window."""
        if self._initialized:
            pygame.quit()
            self._initialized = False
