# oracle/core/solver.py
import logging
from typing import Optional

from .constants import MAX_MOVES, SCORE_BOUND, WIDTH, COLUMN_ORDER
from .position import Position

logger = logging.getLogger(__name__)


class Solver:
    def __init__(self):
        self.nodes = 0

    def solve(self, position: Position) -> dict:
        """
        Root Entry Point.
        Scores the position for the player to move and explains the score.
        """
        self.nodes = 0
        score = self.negamax(position)
        outcome, plies = analyze_score(score, position.num_moves)

        logger.debug("Solved position at move %d: score=%d nodes=%d",
                     position.num_moves, score, self.nodes)

        return {
            "score": score,
            "outcome": outcome,
            "plies_to_outcome": plies,
            "num_moves": position.num_moves,
            "nodes_explored": self.nodes,
        }

    def negamax(self, position: Position, alpha: Optional[int] = None, beta: Optional[int] = None) -> int:
        """
        Fail-soft alpha-beta negamax. Returns the score for the player to move.
        An unset window means the widest one. `position` is never mutated.
        """
        if alpha is None:
            alpha = -SCORE_BOUND
        if beta is None:
            beta = SCORE_BOUND
        self.nodes += 1

        # 1. Board full, nobody connected
        if position.is_full():
            return 0

        # 2. Win right now if we can
        for col in range(WIDTH):
            if position.can_play(col) and position.is_winning_move(col):
                return (MAX_MOVES + 1 - position.num_moves) // 2

        # 3. Best we can still hope for is winning with our next stone
        max_possible = (MAX_MOVES - 1 - position.num_moves) // 2
        if beta > max_possible:
            beta = max_possible
        if alpha >= beta:
            return beta

        # 4. Recursive Search
        for col in COLUMN_ORDER:  # 3, 2, 4, 1...
            if position.can_play(col):
                child = position.clone()
                child.play(col)
                score = -self.negamax(child, -beta, -alpha)

                if score >= beta:
                    return score  # Beta Cutoff
                if score > alpha:
                    alpha = score

        return alpha


def analyze_score(score: int, num_moves: int):
    """
    Maps a score to (outcome, plies until the decisive stone lands).
    The decisive stone is placed on top of N stones, where (MAX_MOVES + 1 - N) // 2 == |score|.
    Even distance from num_moves: we place it. Odd: the opponent does.
    """
    if score == 0:
        return "DRAW", 0

    magnitude = abs(score)
    parity = 0 if score > 0 else 1
    for stones in (MAX_MOVES + 1 - 2 * magnitude, MAX_MOVES - 2 * magnitude):
        if stones >= num_moves and (stones - num_moves) % 2 == parity:
            return ("WIN" if score > 0 else "LOSS"), stones - num_moves + 1
    raise ValueError(f"Score {score} is unreachable from move {num_moves}")
