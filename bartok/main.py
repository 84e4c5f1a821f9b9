"""Headless entry point: plays a game of Bartok between automated seats."""

import logging
from dataclasses import replace
from random import Random

from bartok.game.engine import BartokGame
from bartok.game.state import TurnPhase
from bartok.utils.logger import setup_logging
from config import config

logger = logging.getLogger(__name__)

TARGET_FPS = 60


class Simulation:
    """Drives a game with a fixed time step, like a frame loop."""

    def __init__(self, game: BartokGame, dt: float = 1.0 / TARGET_FPS):
        self.game = game
        self.dt = dt
        self.frames = 0

    def step(self) -> None:
        """Advance one frame."""
        self.game.update(self.dt)
        self.frames += 1

    def run(self, max_frames: int = 100_000) -> TurnPhase:
        """
        Deal if needed and run frames until the game ends.

        Args:
            max_frames: Frame budget before giving up

        Returns:
            The phase the game stopped in
        """
        if not self.game.cards:
            self.game.deal()

        while self.game.phase is not TurnPhase.GAME_OVER and self.frames < max_frames:
            if self._waiting_on_human():
                logger.warning("Stopping: the human seat has to move")
                break
            self.step()

        return self.game.phase

    def _waiting_on_human(self) -> bool:
        player = self.game.current_player
        return (
            player is not None
            and player.is_human
            and self.game.phase is TurnPhase.PRE
        )


def main() -> None:
    """Entry point for a headless all-automated game."""
    setup_logging("DEBUG" if config.debug else config.log_level)

    game_config = replace(config.game, human_seat=None)
    game = BartokGame(game_config=game_config, rng=Random(config.seed))
    simulation = Simulation(game)
    phase = simulation.run()

    if phase is TurnPhase.GAME_OVER and game.winner is not None:
        print(f"{game.winner} wins after {game.turns_played} turns")
    else:
        print(f"No winner after {simulation.frames} frames")


if __name__ == "__main__":
    main()
