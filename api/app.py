"""HTTP API entrypoint for driving a match from a web UI."""

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from env.scenario import Scenario
from runtime.runner import GameRunner

app = FastAPI()
runner: GameRunner | None = None


# Allow a browser-based viewer (served from file:// or other origins)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


class StartRequest(BaseModel):
    scenario: dict


@app.post("/start")
def start(request: StartRequest):
    global runner
    try:
        scenario = Scenario.from_dict(request.scenario)
        runner = GameRunner(scenario)
    except (KeyError, TypeError, ValueError) as exc:
        raise HTTPException(400, f"Invalid scenario: {exc}") from exc
    return {"success": True}


@app.post("/step")
def step():
    if runner is None:
        raise HTTPException(400, "No active match")
    try:
        return runner.step().to_dict()
    except RuntimeError as exc:
        raise HTTPException(400, str(exc)) from exc


@app.post("/stop")
def stop():
    global runner

    if runner is None:
        raise HTTPException(400, "No active match")

    runner.abort()
    runner = None
    return {"success": True, "message": "Match aborted"}


@app.get("/status")
def status():
    if runner is None:
        return {"active": False}
    return {"active": True, "turn": runner.turn, "done": runner.done}
