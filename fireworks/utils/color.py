import pygame
from typing import Tuple


def hsl(hue: float, saturation: float, lightness: float) -> Tuple[int, int, int]:
    """Convert HSL (hue in degrees, saturation/lightness in percent) to an RGB tuple."""
    color = pygame.Color(0, 0, 0)
    saturation = max(0.0, min(100.0, saturation))
    lightness = max(0.0, min(100.0, lightness))
    color.hsla = (hue % 360.0, saturation, lightness, 100)
    return (color.r, color.g, color.b)
