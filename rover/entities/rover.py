# IN THIS FILE: TRACKING ROVER'S CURRENT STATE & MOVEMENT HISTORY

from typing import List

from rover.engine.reducer import Instructions, parse_start, render, trace
from rover.utils.types import RoverState


class Rover:
    """
    Stateful wrapper around the pure reducer.
    Tracks the rover's starting state, current state and every state visited.
    """

    def __init__(self, start: str):
        """
        Initialize rover from a start string.

        Args:
            start: e.g. "1 2 N"

        Raises:
            InvalidStartFormat: malformed start string
        """
        self.start_state = parse_start(start)
        self.current_state = self.start_state
        self.path_history: List[RoverState] = [self.start_state]

    def execute(self, instructions: Instructions) -> RoverState:
        """
        Run instructions from the current state.
        Invalid instructions raise before anything changes.

        Returns:
            The new current state
        """
        states = trace(self.current_state, instructions)
        self.path_history.extend(states[1:])
        self.current_state = states[-1]
        return self.current_state

    def position(self) -> str:
        """Current state rendered as "<x> <y> <heading>"."""
        return render(self.current_state)

    def reset(self) -> None:
        """Go back to the start state and forget the path."""
        self.current_state = self.start_state
        self.path_history = [self.start_state]

    def __repr__(self) -> str:
        return f"Rover({self.position()!r}, steps={len(self.path_history) - 1})"
