import pydantic

from . import ttt_board


class GameConfig(pydantic.BaseModel):
    """Runtime knobs for one terminal game."""

    # Pause before each computer move.
    think_delay_secs: float = pydantic.Field(default=1.0, ge=0.0)
    # Who moves first.
    first_player: ttt_board.Player = ttt_board.Player.HUMAN
    # Seeds the computer's random opening move. None for non-deterministic.
    seed: int | None = None
