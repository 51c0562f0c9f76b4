from rover.commands.generator import InstructionGenerator
from rover.engine.reducer import (
    parse_instructions,
    parse_start,
    render,
    run,
    safe_parse_instructions,
    safe_parse_start,
    safe_run,
    step,
    trace,
)
from rover.entities.fleet import FleetResult, generate_rover_id, random_start, run_fleet
from rover.entities.rover import Rover
from rover.utils.enums import Command, Heading
from rover.utils.errors import (
    InvalidInstructionFormat,
    InvalidPath,
    InvalidStartFormat,
    RoverError,
)
from rover.utils.types import Position, Result, RoverState

__all__ = [
    "Command",
    "FleetResult",
    "Heading",
    "InstructionGenerator",
    "InvalidInstructionFormat",
    "InvalidPath",
    "InvalidStartFormat",
    "Position",
    "Result",
    "Rover",
    "RoverError",
    "RoverState",
    "generate_rover_id",
    "parse_instructions",
    "parse_start",
    "random_start",
    "render",
    "run",
    "run_fleet",
    "safe_parse_instructions",
    "safe_parse_start",
    "safe_run",
    "step",
    "trace",
]
