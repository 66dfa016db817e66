"""
Fireworks - Main Entry Point
Animated fireworks display
"""

import os
os.environ['SDL_VIDEO_CENTERED'] = '1'

from fireworks.core.app import main


if __name__ == "__main__":
    main()
