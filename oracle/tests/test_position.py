import unittest
from oracle.core.position import Position, InvalidMoveError, PreconditionViolation
from oracle.core.constants import WIDTH, HEIGHT, PLAYER_A, PLAYER_B

# 42 moves, no four-in-a-row at any point
DRAW_GAME = "771772212112122177344343343443566565565665"


class TestPosition(unittest.TestCase):
    def assertConsistent(self, position):
        self.assertEqual(position.num_moves, sum(position.height))
        self.assertEqual(position.current, PLAYER_A if position.num_moves % 2 == 0 else PLAYER_B)
        for col in range(WIDTH):
            for row in range(HEIGHT):
                filled = position.board[row][col] != 0
                self.assertEqual(filled, row < position.height[col])

    def test_new_position_is_empty(self):
        position = Position()
        self.assertEqual(position.num_moves, 0)
        self.assertEqual(position.current, PLAYER_A)
        self.assertEqual(position.height, [0] * WIDTH)
        self.assertTrue(all(cell == 0 for row in position.board for cell in row))
        self.assertTrue(all(position.can_play(c) for c in range(WIDTH)))

    def test_play_stacks_and_alternates(self):
        position = Position()
        position.play(3)
        self.assertEqual(position.board[0][3], PLAYER_A)
        self.assertEqual(position.height[3], 1)
        self.assertEqual(position.num_moves, 1)
        self.assertEqual(position.current, PLAYER_B)

        position.play(3)
        self.assertEqual(position.board[1][3], PLAYER_B)
        self.assertEqual(position.height[3], 2)
        self.assertEqual(position.current, PLAYER_A)

    def test_counters_consistent_through_a_full_game(self):
        position = Position()
        for char in DRAW_GAME:
            col = int(char) - 1
            before = position.height[col]
            self.assertFalse(position.is_winning_move(col))
            position.play(col)
            self.assertEqual(position.height[col], before + 1)
            self.assertConsistent(position)
        self.assertTrue(position.is_full())
        self.assertFalse(any(position.can_play(c) for c in range(WIDTH)))

    def test_from_sequence_uses_one_indexed_columns(self):
        position = Position.from_sequence("4453")
        self.assertEqual(position.height, [0, 0, 1, 2, 1, 0, 0])
        self.assertEqual(position.board[0][3], PLAYER_A)
        self.assertEqual(position.board[1][3], PLAYER_B)
        self.assertEqual(position.board[0][4], PLAYER_A)
        self.assertEqual(position.board[0][2], PLAYER_B)
        self.assertConsistent(position)

    def test_from_sequence_rejects_bad_characters(self):
        for moves in ["0", "8", "44a", "4 4", "-1", "4\n"]:
            with self.assertRaises(InvalidMoveError, msg=moves):
                Position.from_sequence(moves)

        with self.assertRaises(InvalidMoveError) as ctx:
            Position.from_sequence("1239")
        self.assertEqual(ctx.exception.index, 3)

    def test_from_sequence_rejects_full_column(self):
        with self.assertRaises(InvalidMoveError) as ctx:
            Position.from_sequence("1111111")
        self.assertEqual(ctx.exception.index, 6)

    @unittest.skipIf(not __debug__, "precondition guard is stripped under -O")
    def test_full_column_precondition(self):
        position = Position.from_sequence("111111")
        self.assertFalse(position.can_play(0))
        with self.assertRaises(PreconditionViolation):
            position.play(0)
        with self.assertRaises(PreconditionViolation):
            position.is_winning_move(0)

    def test_clone_is_independent(self):
        position = Position.from_sequence("4453")
        copy = position.clone()
        copy.play(0)
        self.assertEqual(position.num_moves, 4)
        self.assertEqual(position.height[0], 0)
        self.assertEqual(position.board[0][0], 0)
        self.assertEqual(copy.board[0][0], PLAYER_A)

    def test_mirrored(self):
        position = Position.from_sequence("1123")
        mirror = position.mirrored()
        expected = Position.from_sequence("7765")
        self.assertEqual(mirror.board, expected.board)
        self.assertEqual(mirror.height, expected.height)
        self.assertEqual(mirror.current, expected.current)
        # Source position untouched
        self.assertEqual(position.height[0], 2)

    def test_to_matrix_top_row_first(self):
        matrix = Position.from_sequence("44").to_matrix()
        self.assertEqual(len(matrix), HEIGHT)
        self.assertEqual(matrix[5][3], 1)
        self.assertEqual(matrix[4][3], 2)
        self.assertEqual(matrix[0], [0] * WIDTH)
        rendered = str(Position.from_sequence("44"))
        self.assertEqual(rendered.splitlines()[-1], "|.|.|.|X|.|.|.|")


class TestWinDetection(unittest.TestCase):
    def test_vertical(self):
        position = Position.from_sequence("121212")
        self.assertTrue(position.is_winning_move(0))
        self.assertFalse(position.is_winning_move(1))

    def test_vertical_needs_three_of_the_mover(self):
        # Player B to move: column 1 holds A's stones, column 2 holds B's
        position = Position.from_sequence("1212121")
        self.assertFalse(position.is_winning_move(0))
        self.assertTrue(position.is_winning_move(1))

    def test_horizontal_edges(self):
        self.assertTrue(Position.from_sequence("112233").is_winning_move(3))
        self.assertTrue(Position.from_sequence("776655").is_winning_move(3))

    def test_horizontal_gap(self):
        # A holds columns 0, 1 and 3 on the bottom row
        position = Position.from_sequence("112244")
        self.assertTrue(position.is_winning_move(2))
        self.assertFalse(position.is_winning_move(4))

    def test_diagonal_up_right(self):
        # A holds (0,0), (1,1), (2,2); column 3 lands on row 3
        position = Position.from_sequence("122373347447")
        self.assertEqual(position.height[3], 3)
        self.assertTrue(position.is_winning_move(3))

    def test_diagonal_up_left(self):
        position = Position.from_sequence("766515541441")
        self.assertTrue(position.is_winning_move(3))

    def test_slopes_do_not_combine(self):
        # Landing on (1,1): two stones on each diagonal, three on neither
        position = Position.from_sequence("11123337")
        self.assertEqual(position.current, PLAYER_A)
        self.assertEqual(position.height[1], 1)
        self.assertFalse(position.is_winning_move(1))

    def test_does_not_mutate(self):
        position = Position.from_sequence("121212")
        board = [row[:] for row in position.board]
        position.is_winning_move(0)
        self.assertEqual(position.board, board)
        self.assertEqual(position.num_moves, 6)

    def test_top_row_landing(self):
        # Last free cell sits on the top row; scans must stay in bounds
        position = Position.from_sequence(DRAW_GAME[:41])
        self.assertEqual(position.height[4], HEIGHT - 1)
        self.assertFalse(position.is_winning_move(4))


if __name__ == '__main__':
    unittest.main()
