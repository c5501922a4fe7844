
"""Keyboard events to game commands"""
from typing import Optional

import pygame

from blockfall_game import Command

KEYDOWN_COMMANDS = {
    pygame.K_LEFT: Command.MOVE_LEFT,
    pygame.K_RIGHT: Command.MOVE_RIGHT,
    pygame.K_UP: Command.ROTATE_CW,
    pygame.K_z: Command.ROTATE_CCW,
    pygame.K_DOWN: Command.SOFT_DROP_ON,
    pygame.K_p: Command.TOGGLE_PAUSE,
}

KEYUP_COMMANDS = {
    pygame.K_DOWN: Command.SOFT_DROP_OFF,
}


def command_for(event) -> Optional[Command]:
    if event.type == pygame.KEYDOWN:
        return KEYDOWN_COMMANDS.get(event.key)
    if event.type == pygame.KEYUP:
        return KEYUP_COMMANDS.get(event.key)
    return None
