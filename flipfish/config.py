from dataclasses import dataclass

from flipfish.board import Side


@dataclass
class Config:
    """
    Engine and run configuration.

    Arguments:
        - mode: "protocol" (text protocol on stdin/stdout) or "selfplay"
        - algorithm: search algorithm name, see helper.Algorithm
        - search_depth: plies searched below each root move, 0 evaluates
            the resulting positions directly
        - side: the side the engine plays for
        - opponent_algorithm: algorithm of the opposing engine in self-play
        - opponent_depth: search depth of the opposing engine in self-play
        - seed: seed for the random engine
        - log_level: logging level name
    """

    mode: str = "protocol"
    algorithm: str = "alpha_beta"
    search_depth: int = 2
    side: Side = Side.WHITE
    opponent_algorithm: str = "random"
    opponent_depth: int = 2
    seed: int | None = None
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.search_depth < 0 or self.opponent_depth < 0:
            raise ValueError("search depth must be a non-negative integer")
