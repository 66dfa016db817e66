"""
Input Manager for Fireworks
Maps the launch trigger and quit to rebindable keys, and tracks the pointer
"""

import pygame
from typing import Dict
from enum import Enum, auto

class InputAction(Enum):
    """Input actions that can be rebound."""
    LAUNCH = auto()
    QUIT = auto()

class InputManager:
    """Manages keyboard and mouse input with rebindable keys."""

    def __init__(self):
        self.key_bindings: Dict[InputAction, int] = {
            InputAction.LAUNCH: pygame.K_SPACE,
            InputAction.QUIT: pygame.K_ESCAPE,
        }

        self.alternate_bindings: Dict[InputAction, int] = {
            InputAction.LAUNCH: pygame.K_RETURN,
        }

        self.pressed_actions: Dict[InputAction, bool] = {action: False for action in InputAction}
        self.just_pressed: Dict[InputAction, bool] = {action: False for action in InputAction}

        self.mouse_pos = (0, 0)
        self.mouse_just_pressed = [False, False, False]

    def update(self, events: list):
        """Update input state from this frame's pygame events."""
        self.just_pressed = {action: False for action in InputAction}
        self.mouse_just_pressed = [False, False, False]

        for event in events:
            if event.type == pygame.KEYDOWN:
                action = self.action_for_key(event.key)
                if action is not None:
                    if not self.pressed_actions[action]:
                        self.just_pressed[action] = True
                    self.pressed_actions[action] = True
            elif event.type == pygame.KEYUP:
                action = self.action_for_key(event.key)
                if action is not None:
                    self.pressed_actions[action] = False
            elif event.type == pygame.MOUSEBUTTONDOWN:
                self.mouse_pos = event.pos
                if 1 <= event.button <= 3:
                    self.mouse_just_pressed[event.button - 1] = True
            elif event.type == pygame.MOUSEMOTION:
                self.mouse_pos = event.pos

    def action_for_key(self, key: int):
        for action, bound in self.key_bindings.items():
            if bound == key or self.alternate_bindings.get(action) == key:
                return action
        return None

    def is_action_pressed(self, action: InputAction) -> bool:
        """Check if action is currently held down."""
        return self.pressed_actions.get(action, False)

    def is_action_just_pressed(self, action: InputAction) -> bool:
        """Check if action was just pressed this frame."""
        return self.just_pressed.get(action, False)

    def rebind_key(self, action: InputAction, new_key: int):
        """Rebind an action to a new key."""
        self.key_bindings[action] = new_key

    def get_binding(self, action: InputAction) -> int:
        """Get current key binding for an action."""
        return self.key_bindings.get(action, -1)

    def is_mouse_just_pressed(self, button: int = 0) -> bool:
        """Check if mouse button was just clicked (0=left, 1=middle, 2=right)."""
        return self.mouse_just_pressed[button] if 0 <= button < 3 else False

    def get_mouse_pos(self) -> tuple[int, int]:
        """Get current mouse position."""
        return self.mouse_pos
