import logging
import sys
from collections.abc import Iterator
from dataclasses import replace
from typing import Callable, TextIO, TypeVar

from flipfish.agent import Agent
from flipfish.board import Move, Side
from flipfish.config import Config

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Tournament harness protocol:
#   RDY                                 engine is ready (sent by us)
#   UGO <move_time> <total_time>        new game, we play first as WHITE
#   HEDID <move_time> <total_time> r c  opponent played (r, c), our turn
#   ONEMORE                             new game, we play BLACK
#   BYE                                 stop
#   IDO r c                             our move (sent by us)


class ProtocolError(ValueError):
    """Malformed or truncated protocol input."""


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _read(tokens: Iterator[str], cast: Callable[[str], T], command: str) -> T:
    try:
        token = next(tokens)
    except StopIteration:
        raise ProtocolError(f"{command}: unexpected end of input") from None
    try:
        return cast(token)
    except ValueError:
        raise ProtocolError(f"{command}: expected a number, got {token!r}") from None


def _reply(stdout: TextIO, message: str) -> None:
    print(message, file=stdout, flush=True)


def play(config: Config, stdin: TextIO | None = None, stdout: TextIO | None = None):
    """
    Runs the text protocol until BYE or end of input.

    Arguments:
        - config: engine configuration, the side is set by the protocol
        - stdin: command stream (defaults to sys.stdin)
        - stdout: reply stream (defaults to sys.stdout)
    """
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout

    # init board and engine
    agent = Agent(replace(config, side=Side.WHITE))
    _reply(stdout, "RDY")

    tokens = _tokens(stdin)
    for command in tokens:
        logger.debug("command %s", command)

        if command == "BYE":
            return

        elif command == "UGO":
            move_time = _read(tokens, float, command)
            total_time = _read(tokens, float, command)
            agent.new_game(Side.WHITE)
            move = agent.request_move(move_time, total_time)
            _reply(stdout, f"IDO {move}")

        elif command == "HEDID":
            move_time = _read(tokens, float, command)
            total_time = _read(tokens, float, command)
            row = _read(tokens, int, command)
            col = _read(tokens, int, command)
            agent.opponent_moved(Move(row, col))
            move = agent.request_move(move_time, total_time)
            _reply(stdout, f"IDO {move}")

        elif command == "ONEMORE":
            agent.new_game(Side.BLACK)
            _reply(stdout, "RDY")

        else:
            logger.debug("skipping unknown token %r", command)


def main(config: Config):
    """
    Start the text protocol on stdin/stdout.
    """
    play(config)
    sys.exit()
