"""
Base player interface for the game engine.
"""

from domain.game_state import GameState


class Player:
    """
    Base class/interface for player logic.

    A player stands in for the keyboard: given the current snapshot it
    returns the heading it wants, which is then fed through the same
    direction arbitration as human input.
    """

    def get_move(self, game_state: GameState) -> str:
        """
        Return a heading given the current game state.

        Args:
            game_state: Current state of the game

        Returns:
            One of: "UP", "DOWN", "LEFT", "RIGHT"
        """
        raise NotImplementedError
