"""
pygame_ui.py

pygame front end for the simulator.

``PygameView`` is a plain viewer: it draws every snapshot it is sent and
reports the run as not viable once the window is closed. ``run_app``
wraps it in an interactive window with Start/Stop, Step and Reset
buttons (``R`` also resets, ``SPACE`` toggles running).
"""

from __future__ import annotations

import io
from typing import Optional, Sequence, Tuple

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402
import pygame  # noqa: E402

from foxes_rabbits.config import Params  # noqa: E402
from foxes_rabbits.field import Field  # noqa: E402
from foxes_rabbits.simulator import Simulator  # noqa: E402
from foxes_rabbits.species import SPECIES, Species  # noqa: E402
from foxes_rabbits.view import HeadlessView  # noqa: E402

# --- UI Constants ---
GRID_PIXELS = 720
SIDE_PANEL_WIDTH = 260
PLOT_HEIGHT = 240
FPS = 30

# Colors
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
GRAY = (200, 200, 200)
EMPTY = WHITE


def grid_geometry(depth: int, width: int) -> Tuple[int, int, int]:
    """Cell size and grid pixel extent (width, height) for a depth x width field."""
    cell_size = max(1, GRID_PIXELS // max(depth, width))
    return cell_size, cell_size * width, cell_size * depth


class PygameView(HeadlessView):
    """Opens its window on the first snapshot, sized from that field."""

    def __init__(
        self,
        registry: Sequence[Species] = SPECIES,
        min_species: int = 2,
        show_plot: bool = False,
    ):
        super().__init__(registry, min_species)
        self.show_plot = show_plot
        self.closed = False
        self.step = 0
        self.field: Optional[Field] = None
        self.screen = None
        self.cell_size = self.grid_w = self.grid_h = 0

        pygame.init()
        self.font = pygame.font.SysFont(None, 24)
        self.clock = pygame.time.Clock()

    def attach(self, field: Field) -> None:
        self.field = field
        self.cell_size, self.grid_w, self.grid_h = grid_geometry(field.depth, field.width)
        plot_h = PLOT_HEIGHT if self.show_plot else 0
        self.screen = pygame.display.set_mode((self.grid_w + SIDE_PANEL_WIDTH, self.grid_h + plot_h))
        pygame.display.set_caption("Foxes and Rabbits (Pygame)")

    def show_status(self, step: int, field: Field) -> None:
        super().show_status(step, field)
        if self.screen is None:
            self.attach(field)
        self.step = step
        self.field = field
        self.pump()
        if not self.closed:
            self.render()

    def is_viable(self, field: Field) -> bool:
        return not self.closed and super().is_viable(field)

    def pump(self) -> None:
        for event in pygame.event.get(pygame.QUIT):
            self.closed = True

    def render(self, extra=None) -> None:
        self.screen.fill(WHITE)
        if self.field is not None:
            draw_grid(self.screen, self.field, self.colors, self.cell_size)
        x = self.grid_w + 10
        draw_text(self.screen, f"Step: {self.step}", (x, 10), self.font)
        for i, (tag, n) in enumerate(self.latest().items()):
            draw_text(self.screen, f"{tag.capitalize()}: {n}", (x, 40 + 30 * i), self.font,
                      self.colors.get(tag, BLACK))
        if extra is not None:
            extra(self.screen)
        if self.show_plot and len(self.history) > 1:
            img = plot_history(self.to_frame(), self.registry, (self.grid_w, PLOT_HEIGHT))
            self.screen.blit(img, (0, self.grid_h))
        pygame.display.flip()

    def close(self) -> None:
        self.closed = True
        pygame.quit()


def draw_grid(screen, field: Field, colors, cell_size: int) -> None:
    pygame.draw.rect(screen, EMPTY, (0, 0, field.width * cell_size, field.depth * cell_size))
    for animal in field.animals():
        color = colors.get(animal.species.tag, animal.species.color)
        loc = animal.location
        pygame.draw.rect(screen, color, (loc.col * cell_size, loc.row * cell_size, cell_size, cell_size))
    if cell_size >= 6:
        for col in range(1, field.width):
            pygame.draw.line(screen, GRAY, (col * cell_size, 0), (col * cell_size, field.depth * cell_size))
        for row in range(1, field.depth):
            pygame.draw.line(screen, GRAY, (0, row * cell_size), (field.width * cell_size, row * cell_size))


def draw_text(screen, text, pos, font, color=BLACK):
    surf = font.render(text, True, color)
    screen.blit(surf, pos)


def plot_history(history, registry: Sequence[Species], size):
    fig = plt.figure(figsize=(size[0] / 100, size[1] / 100), dpi=100)
    for sp in registry:
        plt.plot(history["step"], history[sp.tag], label=sp.tag, color=[c / 255.0 for c in sp.color])
    plt.legend()
    plt.xlabel("step")
    plt.ylabel("count")
    plt.tight_layout()
    buf = io.BytesIO()
    fig.savefig(buf, format="png")
    plt.close(fig)
    buf.seek(0)
    return pygame.image.load(buf, "plot.png")


def draw_button(screen, rect, label, font, color):
    pygame.draw.rect(screen, color, rect, border_radius=8)
    surf = font.render(label, True, WHITE)
    screen.blit(surf, (rect.x + (rect.w - surf.get_width()) // 2, rect.y + (rect.h - surf.get_height()) // 2))


def run_app(params: Params, registry: Sequence[Species] = SPECIES) -> None:
    view = PygameView(registry, show_plot=params.plot)
    # The simulator applies the dimension fallback; its first snapshot sizes the window.
    sim = Simulator(params.depth, params.width, view=view, registry=registry,
                    seed=params.seed, torus=params.torus, delay_ms=params.delay_ms)
    running = False

    bx = view.grid_w + 10
    start_rect = pygame.Rect(bx, 140, 110, 36)
    step_rect = pygame.Rect(bx + 120, 140, 110, 36)
    reset_rect = pygame.Rect(bx, 186, 110, 36)

    def buttons(screen):
        draw_button(screen, start_rect, "Stop" if running else "Start", view.font,
                    (200, 100, 100) if running else (100, 200, 100))
        draw_button(screen, step_rect, "Step", view.font, (180, 180, 180) if running else (100, 200, 100))
        draw_button(screen, reset_rect, "Reset", view.font, (100, 100, 200))

    while not view.closed:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                view.closed = True
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_r:
                    running = False
                    sim.reset()
                elif event.key == pygame.K_SPACE:
                    running = not running
            elif event.type == pygame.MOUSEBUTTONDOWN:
                if start_rect.collidepoint(event.pos):
                    running = not running
                elif step_rect.collidepoint(event.pos) and not running:
                    sim.simulate_one_step()
                elif reset_rect.collidepoint(event.pos):
                    running = False
                    sim.reset()
        if view.closed:
            break

        if running:
            if view.is_viable(sim.field):
                sim.simulate_one_step()
                if sim.delay_ms > 0:
                    sim.delay(sim.delay_ms)
            else:
                running = False
        view.render(buttons)
        view.clock.tick(FPS)
    pygame.quit()
