# main.py
import logging
from typing import List, Optional

import uvicorn
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from rover.commands.generator import InstructionGenerator
from rover.engine.reducer import parse_start, render, trace
from rover.entities.fleet import run_fleet
from rover.utils.consts import API_HOST, API_PORT
from rover.utils.enums import Heading
from rover.utils.errors import RoverError
from rover.utils.types import RoverState

logger = logging.getLogger(__name__)

app = FastAPI(title="Rover Command Server")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# =============================================================================
# PYDANTIC MODELS
# =============================================================================

class PathPoint(BaseModel):
    x: int
    y: int
    d: Heading


class RunInput(BaseModel):
    start: str
    instructions: str = ""


class RunOutput(BaseModel):
    final: str
    path: List[PathPoint]
    instructions: List[str]


class FleetRoverInput(BaseModel):
    id: str
    start: str
    instructions: str = ""


class FleetInput(BaseModel):
    rovers: List[FleetRoverInput]


class FleetRoverOutput(BaseModel):
    id: str
    success: bool
    final: Optional[str] = None
    error: Optional[str] = None


class FleetOutput(BaseModel):
    results: List[FleetRoverOutput]


class PathInput(BaseModel):
    path: List[PathPoint]


class InstructionsOutput(BaseModel):
    instructions: str
    compressed: List[str]


# =============================================================================
# CORE
# =============================================================================

def run_rover(start: str, instructions: str) -> dict:
    states = trace(parse_start(start), instructions)
    return {
        "final": render(states[-1]),
        "path": [s.get_dict() for s in states],
        "instructions": InstructionGenerator().compress_instructions(instructions),
    }


# =============================================================================
# ENDPOINTS
# =============================================================================

@app.get("/status")
def health_check():
    return {"status": "ok", "message": "Rover server is running"}


@app.post("/run", response_model=RunOutput)
def run_instructions(input_data: RunInput):
    logger.info("run start=%r instructions=%r", input_data.start, input_data.instructions)
    try:
        return run_rover(input_data.start, input_data.instructions)
    except RoverError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.exception("Unexpected failure in /run")
        raise HTTPException(status_code=500, detail=str(e))


@app.post("/fleet", response_model=FleetOutput)
def run_fleet_instructions(input_data: FleetInput):
    """
    Executes every rover independently. A malformed rover is reported in its
    own result entry; the request itself still succeeds.
    """
    logger.info("fleet size=%d", len(input_data.rovers))
    results = run_fleet((r.id, r.start, r.instructions) for r in input_data.rovers)
    return {
        "results": [
            {"id": r.rover_id, "success": r.success, "final": r.final, "error": r.error}
            for r in results
        ]
    }


@app.post("/instructions", response_model=InstructionsOutput)
def generate_instructions(input_data: PathInput):
    try:
        path = [RoverState.at(p.x, p.y, p.d) for p in input_data.path]
        generator = InstructionGenerator()
        instructions = generator.generate_instructions(path)
        return {
            "instructions": instructions,
            "compressed": generator.compress_instructions(instructions),
        }
    except RoverError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.exception("Unexpected failure in /instructions")
        raise HTTPException(status_code=500, detail=str(e))


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    uvicorn.run(app, host=API_HOST, port=API_PORT)
