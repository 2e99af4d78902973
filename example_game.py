"""
Example script demonstrating the game runner.

This shows how to:
1. Create a scenario
2. Run a single match step by step
3. Run a match to completion and save the scenario for replay
"""

from env.scenario import create_default_scenario
from infra import SCENARIO_STORAGE_DIR, configure_logging, get_logger
from runtime import GameRunner

log = get_logger(__name__)


def main():
    """Run example matches."""
    configure_logging("INFO", logfile=None)

    scenario = create_default_scenario(blue="chessboard", red="idle", seed=42)
    log.info("Loaded scenario: %s", scenario)

    # =========================================================================
    # Example 1: Step through the first few decision cycles
    # =========================================================================
    runner = GameRunner(scenario, verbose=True)
    for _ in range(3):
        frame = runner.step()
        log.info("Turn %d purchases: %s", frame.turn, frame.purchases)

    # =========================================================================
    # Example 2: Chessboard mirror match to completion
    # =========================================================================
    mirror = create_default_scenario(blue="chessboard", red="chessboard", seed=7)
    frame = GameRunner(mirror).run()
    log.info("Final ledger after %d ticks: %s", frame.turn, frame.players)

    path = mirror.save_json(SCENARIO_STORAGE_DIR / "example_mirror.json")
    log.info("Scenario saved to %s", path)


if __name__ == "__main__":
    main()
