"""
Fireworks - Drawing Surface
Thin wrapper over a pygame.Surface exposing the two primitives entities need.
"""

import pygame
from typing import Optional, Tuple

from fireworks.core.constants import COLORS


class DrawingSurface:
    """
    Clears the frame and draws filled circles, optionally with additive
    blending so overlapping particles brighten instead of occluding.
    """

    def __init__(self, target: pygame.Surface, background: Tuple[int, int, int] = COLORS.BACKGROUND):
        self.target = target
        self.background = background

    @property
    def width(self) -> int:
        return self.target.get_width()

    @property
    def height(self) -> int:
        return self.target.get_height()

    def set_target(self, target: pygame.Surface):
        """Point at a new surface (after the window was resized)."""
        self.target = target

    def clear(self, rect: Optional[pygame.Rect] = None):
        self.target.fill(self.background, rect)

    def draw_filled_circle(self, center: Tuple[float, float], radius: float,
                           color: Tuple[int, int, int], opacity: float,
                           additive: bool = True):
        opacity = max(0.0, min(1.0, opacity))
        if opacity == 0:
            return
        r = max(1, int(radius))
        size = r * 2 + 1
        topleft = (int(center[0]) - r, int(center[1]) - r)

        if additive:
            # Black adds nothing, so only the disc contributes light
            stamp = pygame.Surface((size, size))
            stamp.fill((0, 0, 0))
            tint = tuple(int(c * opacity) for c in color[:3])
            pygame.draw.circle(stamp, tint, (r, r), r)
            self.target.blit(stamp, topleft, special_flags=pygame.BLEND_RGB_ADD)
        else:
            stamp = pygame.Surface((size, size), pygame.SRCALPHA)
            pygame.draw.circle(stamp, (*color[:3], int(255 * opacity)), (r, r), r)
            self.target.blit(stamp, topleft)
