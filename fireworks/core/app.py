"""
Fireworks - Application
Window, frame loop and event binding around the Simulation
"""

import pygame

from fireworks.core.constants import WINDOW_TITLE, COLORS
from fireworks.core.input_manager import InputManager, InputAction
from fireworks.core.logger import get_logger, init_logger
from fireworks.core.settings_manager import SettingsManager
from fireworks.core.simulation import Simulation
from fireworks.graphics.surface import DrawingSurface

AUTO_LAUNCH_EVENT = pygame.USEREVENT + 1


class FireworksApp:
    """
    Runs the display: one simulation tick and one render per frame, paced by
    pygame's frame clock. Rockets come from the auto-launch timer, a click
    (launched under the pointer) or the launch key.
    """

    def __init__(self, settings_manager: SettingsManager = None):
        pygame.init()
        self.logger = get_logger()
        self.settings_manager = settings_manager or SettingsManager()

        width = self.settings_manager.get("display", "width")
        height = self.settings_manager.get("display", "height")
        self.target_fps = self.settings_manager.get("display", "target_fps")
        self.show_stats = self.settings_manager.get("display", "show_stats")

        # Display setup
        self.screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        pygame.display.set_caption(WINDOW_TITLE)
        self.surface = DrawingSurface(self.screen, COLORS.BACKGROUND)

        # Timing
        self.frame_clock = pygame.time.Clock()
        self.stats_timer = 0.0

        self.simulation = Simulation(
            width, height,
            max_rockets=self.settings_manager.get("show", "max_rockets")
        )
        self.input_manager = InputManager()
        self.running = True

        if self.settings_manager.get("show", "auto_launch"):
            interval = self.settings_manager.get("show", "auto_launch_interval")
            pygame.time.set_timer(AUTO_LAUNCH_EVENT, max(1, int(interval * 1000)))
            self.logger.info(f"Auto-launch every {interval:.2f}s")

        self.logger.info(f"Display opened at {width}x{height}")

    def run(self):
        """Main loop."""
        try:
            while self.running:
                dt = self.frame_clock.tick(self.target_fps) / 1000.0

                events = pygame.event.get()
                self.input_manager.update(events)
                for event in events:
                    self._handle_event(event)

                if self.input_manager.is_action_just_pressed(InputAction.QUIT):
                    self.running = False
                if self.input_manager.is_action_just_pressed(InputAction.LAUNCH):
                    self.simulation.launch_rocket()
                if self.input_manager.is_mouse_just_pressed(0):
                    self.simulation.launch_rocket(self.input_manager.get_mouse_pos()[0])

                self.simulation.tick()
                self.simulation.render(self.surface)
                pygame.display.flip()

                self._update_stats(dt)
        except Exception:
            self.logger.critical("Unhandled error in frame loop", exc_info=True)
            raise
        finally:
            self._cleanup()

    def _handle_event(self, event):
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == AUTO_LAUNCH_EVENT:
            self.simulation.launch_rocket()
        elif event.type == pygame.VIDEORESIZE:
            self.screen = pygame.display.get_surface()
            self.surface.set_target(self.screen)
            self.simulation.resize(self.surface.width, self.surface.height)

    def _update_stats(self, dt: float):
        if not self.show_stats:
            return
        self.stats_timer += dt
        if self.stats_timer >= 1.0:
            self.stats_timer = 0.0
            pygame.display.set_caption(
                f"{WINDOW_TITLE} | FPS: {self.frame_clock.get_fps():.1f} | "
                f"Rockets: {len(self.simulation.rockets)} | "
                f"Entities: {self.simulation.entity_count()}"
            )

    def _cleanup(self):
        pygame.time.set_timer(AUTO_LAUNCH_EVENT, 0)
        self.logger.info(
            f"Shutting down after {self.simulation.launched} launches, "
            f"{self.simulation.exploded} explosions"
        )
        pygame.quit()


def main():
    """Entry point for the display."""
    init_logger()
    app = FireworksApp()
    app.run()


if __name__ == "__main__":
    main()
