# IN THIS FILE: HEADINGS and COMMANDS
from enum import Enum


class Heading(str, Enum):
    """
    Rover facing direction.
    Members are declared in clockwise order, which gives each heading its ordinal.
    """
    NORTH = "N"
    EAST = "E"
    SOUTH = "S"
    WEST = "W"

    def __str__(self):
        return self.value

    @property
    def ordinal(self) -> int:
        """Clockwise index starting from NORTH (0..3)."""
        return _CLOCKWISE.index(self)

    @staticmethod
    def rotation_steps(h1: 'Heading', h2: 'Heading') -> int:
        """
        Number of clockwise quarter turns to go from h1 to h2.

        Examples:
            NORTH → EAST: 1
            NORTH → SOUTH: 2
            NORTH → WEST: 3 (a single counter-clockwise turn)
        """
        return (h2.ordinal - h1.ordinal) % 4


_CLOCKWISE = (Heading.NORTH, Heading.EAST, Heading.SOUTH, Heading.WEST)


class Command(str, Enum):
    """
    Single-character rover instructions.
    Value is the character used in instruction strings.
    """
    TURN_LEFT = "L"
    TURN_RIGHT = "R"
    MOVE = "M"

    def __str__(self):
        return self.value
