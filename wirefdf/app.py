"""Command line entry point and the window that shows a wireframe."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from .colors import BLACK  # noqa: E402
from .geometry import WINDOW_HEIGHT, WINDOW_WIDTH, Point  # noqa: E402
from .mapfile import MapFileError, load_map  # noqa: E402
from .model import Wireframe  # noqa: E402
from .raster import Canvas, draw_map  # noqa: E402

WINDOW_TITLE = "FdF"
_FRAME_RATE = 30


def build_scene(path: str | os.PathLike[str]) -> Wireframe:
    """Load a map file and turn it into an autoscaled isometric wireframe."""
    wireframe = Wireframe.from_heights(load_map(path))
    wireframe.iso_view()
    wireframe.autoscale()
    return wireframe


def render(wireframe: Wireframe) -> Canvas:
    """Draw the wireframe centred on a black window-sized canvas."""
    canvas = Canvas(WINDOW_WIDTH, WINDOW_HEIGHT)
    canvas.fill(BLACK)
    offset = Point(float(WINDOW_WIDTH // 2), float(WINDOW_HEIGHT // 2), 0.0)
    draw_map(canvas, wireframe, offset)
    return canvas


def _to_surface(canvas: Canvas) -> pygame.Surface:
    pixels = canvas.pixels
    if sys.byteorder == "big":
        pixels = pixels[:]
        pixels.byteswap()
    raw = pixels.tobytes()
    rgb = bytearray(len(raw) // 4 * 3)
    rgb[0::3] = raw[2::4]
    rgb[1::3] = raw[1::4]
    rgb[2::3] = raw[0::4]
    data = bytes(rgb)
    return pygame.image.frombuffer(data, (canvas.width, canvas.height), "RGB").copy()


def run(wireframe: Wireframe) -> int:
    """Show the wireframe in a window until it is closed or Escape is pressed."""
    pygame.init()
    try:
        screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption(WINDOW_TITLE)
        frame = _to_surface(render(wireframe))
        clock = pygame.time.Clock()
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return 0
                if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    return 0
            screen.blit(frame, (0, 0))
            pygame.display.flip()
            clock.tick(_FRAME_RATE)
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the viewer on the map file named on the command line."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("Usage: wirefdf MAPFILE", file=sys.stderr)
        return 1
    try:
        wireframe = build_scene(args[0])
    except MapFileError as exc:
        print(exc, file=sys.stderr)
        return 1
    try:
        return run(wireframe)
    except pygame.error as exc:
        print(f"Failed to set up the display: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())