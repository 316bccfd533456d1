# main.py
import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

import pygame

from raymond import config
from raymond.camera.camera import Move
from raymond.logging_config import setup_logging
from raymond.renderer.image import Image
from raymond.renderer.raytracer import Renderer
from raymond.scene import PRESETS, RenderSettings, Scene

logger = logging.getLogger("raymond.main")

# Keys that trigger a one-step camera move on KEYDOWN.
KEY_MOVES = {
    pygame.K_a: Move.LEFT,
    pygame.K_LEFT: Move.LEFT,
    pygame.K_d: Move.RIGHT,
    pygame.K_RIGHT: Move.RIGHT,
    pygame.K_w: Move.FORWARD,
    pygame.K_UP: Move.FORWARD,
    pygame.K_s: Move.BACK,
    pygame.K_DOWN: Move.BACK,
    pygame.K_SPACE: Move.UP,
    pygame.K_LSHIFT: Move.DOWN,
    pygame.K_RSHIFT: Move.DOWN,
}


class Application:
    """
    pygame window showing the scene. Key presses move the camera one step;
    the frame is re-rendered only after the camera has moved.
    """
    def __init__(self, scene: Scene, width: int, height: int, backend: str,
                 window_scale: int = config.WINDOW_SCALE, rows_per_band: int = config.ROWS_PER_BAND):
        pygame.init()

        self.render_width = width
        self.render_height = height
        self.window_width = width * window_scale
        self.window_height = height * window_scale

        self.screen = pygame.display.set_mode((self.window_width, self.window_height))
        pygame.display.set_caption("raymond")

        self.scene = scene
        self.image = Image(width, height)
        self.renderer = Renderer(scene, backend=backend, rows_per_band=rows_per_band)

        self.clock = pygame.time.Clock()
        self.font = pygame.font.Font(None, 24)
        self.needs_render = True
        self.last_render_time = 0.0
        self.frame_count = 0

    def handle_event(self, event) -> bool:
        """Applies one pygame event. Returns False when the app should quit."""
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                return False
            move = KEY_MOVES.get(event.key)
            if move is not None:
                # Events are handled between renders, never during one.
                self.scene.move(move)
                self.needs_render = True
            elif event.key == pygame.K_f:
                pygame.display.toggle_fullscreen()
        return True

    def draw(self):
        frame_surface = pygame.image.frombuffer(
            self.image.pixels_bytes(), (self.render_width, self.render_height), "RGBA")
        if (self.render_width, self.render_height) != (self.window_width, self.window_height):
            frame_surface = pygame.transform.scale(frame_surface, (self.window_width, self.window_height))
        self.screen.blit(frame_surface, (0, 0))

        eye = self.scene.camera.eye
        text = self.font.render(
            f"eye ({eye.x:g}, {eye.y:g}, {eye.z:g}) | {self.last_render_time * 1000:.0f} ms | {self.renderer.backend}",
            True, (255, 255, 255))
        self.screen.blit(text, (10, 10))
        pygame.display.flip()

    def run(self):
        logger.info("Render resolution: %dx%d, window %dx%d",
                    self.render_width, self.render_height, self.window_width, self.window_height)
        try:
            running = True
            while running:
                self.clock.tick(config.TARGET_FPS)
                for event in pygame.event.get():
                    if not self.handle_event(event):
                        running = False
                        break

                if running and self.needs_render:
                    self.last_render_time = self.renderer.render(self.image)
                    self.needs_render = False
                    self.frame_count += 1
                    if self.frame_count == 1:
                        logger.info("First frame took %.3fs", self.last_render_time)

                self.draw()
        finally:
            logger.info("Cleaning up...")
            pygame.quit()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="raymond", description="Ray cast a scene of spheres.")
    parser.add_argument("--width", type=int, default=config.WIDTH, help="Render width in pixels")
    parser.add_argument("--height", type=int, default=config.HEIGHT, help="Render height in pixels")
    parser.add_argument("--backend", choices=config.BACKENDS, default=config.BACKEND,
                        help="Render backend")
    parser.add_argument("--scene", choices=sorted(PRESETS), default="default", help="Preset scene")
    parser.add_argument("--output", type=Path, default=None,
                        help="Render once and save to this image file instead of opening a window")
    parser.add_argument("--no-shadows", action="store_true", help="Skip shadow rays")
    parser.add_argument("--no-reflections", action="store_true", help="Skip mirror bounces")
    parser.add_argument("--no-sky", action="store_true", help="Black background")
    parser.add_argument("--log-level", default=config.LOG_LEVEL, help="Logging level")
    return parser


def settings_from_args(args) -> RenderSettings:
    return RenderSettings(
        shadows=not args.no_shadows,
        reflections=not args.no_reflections,
        sky=not args.no_sky,
        max_depth=config.MAX_DEPTH,
    )


def render_to_file(scene: Scene, width: int, height: int, backend: str, output: Path) -> Image:
    image = Image(width, height)
    renderer = Renderer(scene, backend=backend, rows_per_band=config.ROWS_PER_BAND)
    elapsed = renderer.render(image)
    image.save(output)
    logger.info("Saved %dx%d render to %s in %.3fs", width, height, output, elapsed)
    return image


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging("raymond", args.log_level)

    if args.width <= 0 or args.height <= 0:
        logger.error("Width and height must be positive, got %dx%d", args.width, args.height)
        return 2

    scene = PRESETS[args.scene](settings_from_args(args), config.MOVE_STEP)

    if args.output is not None:
        render_to_file(scene, args.width, args.height, args.backend, args.output)
        return 0

    app = Application(scene, args.width, args.height, args.backend)
    try:
        app.run()
    except Exception:
        logger.exception("Error during execution")
        raise
    return 0


if __name__ == "__main__":
    sys.exit(main())
