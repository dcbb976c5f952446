import dataclasses
import enum
import random
from typing import Iterator, Sequence

_SIZE = 3

_FULL_MASK = 0b111111111

# Winning lines under row-major indexing, bit n is cell (n // 3, n % 3).
WIN_PATTERNS = (
    # Horizontal.
    0b000000111,
    0b000111000,
    0b111000000,
    # Vertical.
    0b001001001,
    0b010010010,
    0b100100100,
    # Diagonal.
    0b100010001,
    0b001010100,
)


class OutOfBoundsError(Exception):
    pass


class IllegalBoardLayout(Exception):
    pass


class Player(enum.Enum):
    HUMAN = enum.auto()
    COMPUTER = enum.auto()

    def opponent(self) -> "Player":
        return Player.COMPUTER if self is Player.HUMAN else Player.HUMAN

    @property
    def display_name(self) -> str:
        return "You" if self is Player.HUMAN else "Computer"

    @property
    def symbol(self) -> str:
        return "O" if self is Player.HUMAN else "X"

    def __str__(self) -> str:
        return self.display_name


@dataclasses.dataclass(frozen=True)
class Move:
    row: int
    col: int
    player: Player


def _bit(row: int, col: int) -> int:
    return 1 << (row * _SIZE + col)


def _has_line(occupied: int) -> bool:
    return any(pattern & occupied == pattern for pattern in WIN_PATTERNS)


class Grid:
    """Fixed 3x3 cells, mirrored by one occupancy bit field per player."""

    def __init__(self) -> None:
        self._cells: list[Player | None] = [None] * (_SIZE * _SIZE)
        self._masks: dict[Player, int] = {Player.HUMAN: 0, Player.COMPUTER: 0}

    def __getitem__(self, pos: tuple[int, int]) -> Player | None:
        row, col = pos
        return self._cells[row * _SIZE + col]

    def copy(self) -> "Grid":
        other = Grid()
        other._cells = self._cells.copy()
        other._masks = dict(self._masks)
        return other

    def mask(self, player: Player) -> int:
        return self._masks[player]

    def set(self, row: int, col: int, player: Player) -> None:
        # Range is checked by Board.
        bit = _bit(row, col)
        self._cells[row * _SIZE + col] = player
        self._masks[player] |= bit
        self._masks[player.opponent()] &= ~bit

    def is_empty_at(self, row: int, col: int) -> bool:
        return self._cells[row * _SIZE + col] is None

    def free_cells(self) -> Iterator[tuple[int, int]]:
        # A fresh generator per call, so iteration can be restarted.
        empties = _FULL_MASK & ~self._masks[Player.HUMAN] & ~self._masks[Player.COMPUTER]
        for n in range(_SIZE * _SIZE):
            if empties & (1 << n):
                yield n // _SIZE, n % _SIZE

    def all_filled(self) -> bool:
        return self._masks[Player.HUMAN] | self._masks[Player.COMPUTER] == _FULL_MASK

    def all_empty(self) -> bool:
        return self._masks[Player.HUMAN] | self._masks[Player.COMPUTER] == 0

    def winner(self) -> Player | None:
        # Human is checked first. Both winning at once cannot happen in legal play.
        if _has_line(self._masks[Player.HUMAN]):
            return Player.HUMAN
        if _has_line(self._masks[Player.COMPUTER]):
            return Player.COMPUTER
        return None

    def rows(self) -> Iterator[list[Player | None]]:
        for row in range(_SIZE):
            yield self._cells[row * _SIZE : (row + 1) * _SIZE]


class Board:
    """The game position. Owns a single Grid and nothing else."""

    def __init__(self, grid: Grid | None = None) -> None:
        self.grid = grid if grid is not None else Grid()

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> "Board":
        """Constructs a partially filled board.

        Args:
            rows: Three strings of length 3 with O (human), X (computer) or
                `.` for empty. For example ["OO.", ".X.", "..."]. A single
                string with '|' separators is also accepted, e.g. "OO.|.X.|...".
        """
        if isinstance(rows, str):
            rows = rows.split("|")
        if len(rows) != _SIZE or any(len(r) != _SIZE for r in rows):
            raise IllegalBoardLayout(f"Must be 3 rows of 3 cells: {rows}")
        board = cls()
        for row, line in enumerate(rows):
            for col, c in enumerate(line):
                if c == Player.HUMAN.symbol:
                    board.grid.set(row, col, Player.HUMAN)
                elif c == Player.COMPUTER.symbol:
                    board.grid.set(row, col, Player.COMPUTER)
                elif c != ".":
                    raise IllegalBoardLayout(f"Must be O, X or .: {rows}")
        return board

    def apply_move(self, move: Move) -> None:
        if not (0 <= move.row < _SIZE and 0 <= move.col < _SIZE):
            raise OutOfBoundsError(
                f"index out of bounds: ({move.row}, {move.col})"
            )
        # An occupied cell is overwritten, not rejected.
        self.grid.set(move.row, move.col, move.player)

    def choose_random_free_move(
        self, player: Player, rng: random.Random | None = None
    ) -> Move:
        free = list(self.grid.free_cells())
        if not free:
            raise ValueError("No free cells left on the board.")
        row, col = (rng or random).choice(free)
        return Move(row, col, player)

    def play_random_move(
        self, player: Player, rng: random.Random | None = None
    ) -> Move:
        move = self.choose_random_free_move(player, rng)
        self.apply_move(move)
        return move

    def free_cells(self) -> Iterator[tuple[int, int]]:
        return self.grid.free_cells()

    def count_free(self) -> int:
        return sum(1 for _ in self.grid.free_cells())

    def is_game_over(self) -> bool:
        # Only checks exhaustion. Callers check winner() first.
        return self.grid.all_filled()

    def is_empty(self) -> bool:
        return self.grid.all_empty()

    def winner(self) -> Player | None:
        return self.grid.winner()

    def clone(self) -> "Board":
        return Board(self.grid.copy())

    def render(self) -> str:
        line_sep = "-" * (2 * _SIZE + 1)
        lines = ["", line_sep]
        for row in self.grid.rows():
            cells = [" " if p is None else p.symbol for p in row]
            lines.append("|" + "|".join(cells) + "|")
            lines.append(line_sep)
        return "\n".join(lines)

    def as_string(self) -> str:
        # Returns e.g. OO.|.X.|...
        return "|".join(
            "".join("." if p is None else p.symbol for p in row)
            for row in self.grid.rows()
        )

    def __str__(self) -> str:
        return self.render()
