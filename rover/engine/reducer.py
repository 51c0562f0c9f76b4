# IN THIS FILE: PARSING, STEP/RUN REDUCER, RENDERING
import logging
from functools import reduce
from itertools import accumulate
from typing import Callable, Dict, List, Sequence, Union

from rover.utils.consts import (
    INSTRUCTION_STRING_PATTERN,
    MOVE_VECTORS,
    START_STRING_PATTERN,
    TURN_LEFT_MAP,
    TURN_RIGHT_MAP,
)
from rover.utils.enums import Command, Heading
from rover.utils.errors import InvalidInstructionFormat, InvalidStartFormat, RoverError
from rover.utils.types import Position, Result, RoverState

logger = logging.getLogger(__name__)

# Raw instruction string or an already parsed command sequence
Instructions = Union[str, Sequence[Command]]


# =============================================================================
# PARSING
# =============================================================================

def parse_start(text: str) -> RoverState:
    """
    Parse a start string such as "1 2 N".

    Raises:
        InvalidStartFormat: text is not '<x> <y> <N|E|S|W>' with non-negative
            integers and single spaces.
    """
    match = START_STRING_PATTERN.fullmatch(text) if isinstance(text, str) else None
    if match is None:
        logger.debug("Rejected start string %r", text)
        raise InvalidStartFormat(text)

    x, y, heading = match.groups()
    try:
        return RoverState.at(int(x), int(y), Heading(heading))
    except ValueError as e:
        logger.debug("Start string %r does not convert: %s", text, e)
        raise InvalidStartFormat(text) from e


def parse_instructions(text: str) -> List[Command]:
    """
    Parse an instruction string such as "LMLMM". The empty string is valid.

    Raises:
        InvalidInstructionFormat: text contains anything other than L, R, M.
    """
    if not isinstance(text, str) or INSTRUCTION_STRING_PATTERN.fullmatch(text) is None:
        logger.debug("Rejected instruction string %r", text)
        raise InvalidInstructionFormat(text)
    return [Command(c) for c in text]


def _coerce_commands(instructions: Instructions) -> List[Command]:
    if isinstance(instructions, str):
        return parse_instructions(instructions)
    try:
        return [Command(c) for c in instructions]
    except (TypeError, ValueError) as e:
        raise InvalidInstructionFormat(instructions) from e


# =============================================================================
# REDUCER
# =============================================================================

def _turn_left(state: RoverState) -> RoverState:
    return RoverState(position=state.position, heading=TURN_LEFT_MAP[state.heading])


def _turn_right(state: RoverState) -> RoverState:
    return RoverState(position=state.position, heading=TURN_RIGHT_MAP[state.heading])


def _move(state: RoverState) -> RoverState:
    dx, dy = MOVE_VECTORS[state.heading]
    return RoverState(
        position=Position(x=state.x + dx, y=state.y + dy),
        heading=state.heading,
    )


COMMAND_HANDLERS: Dict[Command, Callable[[RoverState], RoverState]] = {
    Command.TURN_LEFT: _turn_left,
    Command.TURN_RIGHT: _turn_right,
    Command.MOVE: _move,
}


def step(state: RoverState, command: Command) -> RoverState:
    """Apply a single command. Never mutates state."""
    try:
        handler = COMMAND_HANDLERS[Command(command)]
    except ValueError as e:
        raise InvalidInstructionFormat(command) from e
    return handler(state)


def run(initial_state: RoverState, instructions: Instructions) -> RoverState:
    """
    Apply every command left to right and return the final state.
    Instructions are validated in full before the first step.
    """
    return reduce(step, _coerce_commands(instructions), initial_state)


def trace(initial_state: RoverState, instructions: Instructions) -> List[RoverState]:
    """
    Like run(), but keeps every intermediate state.

    Returns:
        [initial_state, state after command 1, ..., final state]
    """
    return list(accumulate(_coerce_commands(instructions), step, initial=initial_state))


# =============================================================================
# RENDERING
# =============================================================================

def render(state: RoverState) -> str:
    """
    Render as "<x> <y> <heading>".
    Negative coordinates are rendered as-is even though parse_start rejects them.
    """
    return str(state)


# =============================================================================
# RESULT VARIANTS (no exceptions for malformed input)
# =============================================================================

def safe_parse_start(text: str) -> Result[RoverState]:
    try:
        return Result.ok(parse_start(text))
    except RoverError as e:
        return Result.failure(e)


def safe_parse_instructions(text: str) -> Result[List[Command]]:
    try:
        return Result.ok(parse_instructions(text))
    except RoverError as e:
        return Result.failure(e)


def safe_run(initial_state: RoverState, instructions: Instructions) -> Result[RoverState]:
    try:
        return Result.ok(run(initial_state, instructions))
    except RoverError as e:
        return Result.failure(e)
