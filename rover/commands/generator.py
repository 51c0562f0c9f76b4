# rover/commands/generator.py
from itertools import groupby
from typing import List, Sequence

from rover.engine.reducer import parse_instructions
from rover.utils.consts import MOVE_VECTORS
from rover.utils.enums import Command, Heading
from rover.utils.errors import InvalidPath
from rover.utils.types import RoverState


class InstructionGenerator:
    """
    Turns a path of rover states back into the instruction string that
    replays it. Inverse of trace().
    """

    def generate_instructions(self, path: Sequence[RoverState]) -> str:
        commands: List[Command] = []
        for i in range(1, len(path)):
            commands.extend(self._commands_between(i, path[i - 1], path[i]))
        return "".join(c.value for c in commands)

    def _commands_between(self, index: int, prev: RoverState, curr: RoverState) -> List[Command]:
        if prev == curr:
            return []  # duplicate waypoint

        if prev.heading == curr.heading:
            # STRAIGHT: exactly one cell along the heading
            if (curr.x - prev.x, curr.y - prev.y) == MOVE_VECTORS[prev.heading]:
                return [Command.MOVE]
            raise InvalidPath(index, prev, curr)

        # TURNING: position must stay put
        if prev.position != curr.position:
            raise InvalidPath(index, prev, curr)

        quarter_turns = Heading.rotation_steps(prev.heading, curr.heading)
        if quarter_turns == 1:
            return [Command.TURN_RIGHT]
        if quarter_turns == 3:
            return [Command.TURN_LEFT]
        return [Command.TURN_RIGHT, Command.TURN_RIGHT]  # 180

    def compress_instructions(self, instructions: str) -> List[str]:
        """
        Run-length summary for display: "MMMRMM" -> ["M3", "R", "M2"].
        Moves are merged with a count, turns are listed one by one.
        """
        compressed = []
        for command, group in groupby(parse_instructions(instructions)):
            count = len(list(group))
            if command == Command.MOVE:
                compressed.append(f"{command.value}{count}")
            else:
                compressed.extend([command.value] * count)
        return compressed
