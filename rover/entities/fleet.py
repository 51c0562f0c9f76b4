# IN THIS FILE: RUNNING SEVERAL ROVERS AT ONCE & RANDOM PLACEMENT
import random
import string
import time
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from rover.engine.reducer import render, safe_parse_start, safe_run
from rover.utils.consts import (
    RANDOM_MAX_X,
    RANDOM_MAX_Y,
    ROVER_ID_PREFIX,
    ROVER_ID_SUFFIX_LENGTH,
)
from rover.utils.enums import Heading
from rover.utils.types import Result, RoverState


@dataclass(frozen=True)
class FleetResult:
    rover_id: str
    result: Result[RoverState]

    @property
    def success(self) -> bool:
        return self.result.success

    @property
    def final(self) -> Optional[str]:
        return render(self.result.value) if self.result.success else None

    @property
    def error(self) -> Optional[str]:
        return None if self.result.success else str(self.result.error)


def run_fleet(entries: Iterable[Tuple[str, str, str]]) -> List[FleetResult]:
    """
    Execute each (rover_id, start, instructions) entry independently.
    A malformed entry reports its own error and does not affect the others.
    Output order matches input order.
    """
    results = []
    for rover_id, start, instructions in entries:
        outcome = safe_parse_start(start).then(
            lambda state: safe_run(state, instructions)
        )
        results.append(FleetResult(rover_id, outcome))
    return results


def random_start(
    max_x: int = RANDOM_MAX_X,
    max_y: int = RANDOM_MAX_Y,
    rng: Optional[random.Random] = None,
) -> str:
    """Random valid start string with 0 <= x < max_x and 0 <= y < max_y."""
    rng = rng or random.Random()
    heading = rng.choice(list(Heading))
    return f"{rng.randrange(max_x)} {rng.randrange(max_y)} {heading.value}"


def generate_rover_id(prefix: str = ROVER_ID_PREFIX, rng: Optional[random.Random] = None) -> str:
    """Unique-enough id: '<prefix>-<epoch millis>-<7 lowercase alphanumerics>'."""
    rng = rng or random.Random()
    suffix = "".join(rng.choices(string.ascii_lowercase + string.digits, k=ROVER_ID_SUFFIX_LENGTH))
    return f"{prefix}-{int(time.time() * 1000)}-{suffix}"
