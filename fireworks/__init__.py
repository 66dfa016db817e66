"""
Fireworks - Animated particle fireworks display
"""
