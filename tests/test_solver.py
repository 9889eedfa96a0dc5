import unittest

from edu_crossword.core.constants import Direction
from edu_crossword.core.exceptions import InputLockedError
from edu_crossword.core.models import Clue, ClueList, PlacedWord, Puzzle
from edu_crossword.engine.grid import GridModel
from edu_crossword.engine.solver import (
    CellStatus,
    InteractiveSolver,
    Selection,
    SolverState,
    next_cell_in_direction,
)


ANSWERS = {
    "15-13": "G",
    "15-14": "A",
    "15-15": "T",
    "15-16": "O",
    "14-14": "C",
    "16-14": "S",
    "17-14": "A",
}


def gato_casa() -> Puzzle:
    grid = GridModel(30)
    grid.write_word(PlacedWord("GATO", "Animal doméstico", 15, 13, Direction.ACROSS), 1)
    grid.write_word(PlacedWord("CASA", "Onde se mora", 14, 14, Direction.DOWN), 2)
    clues = ClueList(across=[Clue(1, "Animal doméstico")], down=[Clue(2, "Onde se mora")])
    return Puzzle(grid, clues)


class CheckTests(unittest.TestCase):
    def setUp(self) -> None:
        self.solver = InteractiveSolver(gato_casa())

    def test_all_correct(self) -> None:
        self.solver.state.user_input = dict(ANSWERS)
        statuses = self.solver.check()
        self.assertEqual(len(statuses), 7)
        self.assertTrue(all(status == CellStatus.CORRECT for status in statuses.values()))
        self.assertTrue(self.solver.state.checking)
        self.assertTrue(self.solver.is_solved())

    def test_one_wrong_letter_only_marks_that_cell(self) -> None:
        self.solver.state.user_input = dict(ANSWERS, **{"16-14": "Z"})
        statuses = self.solver.check()
        self.assertEqual(statuses[(16, 14)], CellStatus.INCORRECT)
        others = {pos: s for pos, s in statuses.items() if pos != (16, 14)}
        self.assertTrue(all(status == CellStatus.CORRECT for status in others.values()))
        self.assertTrue(self.solver.is_complete())
        self.assertFalse(self.solver.is_solved())

    def test_blank_cells_are_neutral(self) -> None:
        self.solver.state.user_input = {"15-13": "G"}
        statuses = self.solver.check()
        self.assertEqual(statuses[(15, 13)], CellStatus.CORRECT)
        self.assertEqual(statuses[(17, 14)], CellStatus.NEUTRAL)
        self.assertEqual(self.solver.cell_status(0, 0), CellStatus.NEUTRAL)

    def test_typing_is_locked_while_checking(self) -> None:
        self.solver.check()
        with self.assertRaises(InputLockedError):
            self.solver.input(15, 13, "g")


class SelectionTests(unittest.TestCase):
    def setUp(self) -> None:
        self.solver = InteractiveSolver(gato_casa())

    def test_prefers_across(self) -> None:
        self.assertEqual(self.solver.select(15, 14), Selection(15, 14, Direction.ACROSS))
        self.assertEqual(self.solver.select(14, 14), Selection(14, 14, Direction.DOWN))

    def test_reselecting_toggles_when_possible(self) -> None:
        self.solver.select(15, 14)
        self.assertEqual(self.solver.select(15, 14).direction, Direction.DOWN)
        self.assertEqual(self.solver.select(15, 14).direction, Direction.ACROSS)

    def test_reselecting_single_direction_cell_keeps_direction(self) -> None:
        self.solver.select(15, 16)
        self.assertEqual(self.solver.select(15, 16), Selection(15, 16, Direction.ACROSS))

    def test_empty_cell_clears_selection(self) -> None:
        self.solver.select(15, 14)
        self.assertIsNone(self.solver.select(0, 0))
        self.assertIsNone(self.solver.state.selected)

    def test_active_word(self) -> None:
        self.solver.select(16, 14)
        self.assertEqual(self.solver.active_clue_number, 2)
        self.assertTrue(self.solver.is_in_active_word(15, 14))
        self.assertTrue(self.solver.is_in_active_word(17, 14))
        self.assertFalse(self.solver.is_in_active_word(15, 13))
        self.assertFalse(self.solver.is_in_active_word(3, 3))


class InputTests(unittest.TestCase):
    def setUp(self) -> None:
        self.solver = InteractiveSolver(gato_casa())

    def test_input_normalizes_and_advances(self) -> None:
        self.solver.select(15, 13)
        self.assertEqual(self.solver.input(15, 13, "g"), (15, 14))
        self.assertEqual(self.solver.input(15, 14, "ã"), (15, 15))
        self.assertEqual(self.solver.state.user_input["15-13"], "G")
        self.assertEqual(self.solver.state.user_input["15-14"], "A")
        self.assertEqual(self.solver.state.selected, Selection(15, 15, Direction.ACROSS))

    def test_last_cell_does_not_advance(self) -> None:
        self.solver.select(15, 16)
        self.assertIsNone(self.solver.input(15, 16, "o"))
        self.assertEqual(self.solver.state.selected, Selection(15, 16, Direction.ACROSS))

    def test_clearing_a_cell_does_not_advance(self) -> None:
        self.solver.select(14, 14)
        self.assertIsNone(self.solver.input(14, 14, ""))
        self.assertEqual(self.solver.state.user_input["14-14"], "")

    def test_only_first_character_is_kept(self) -> None:
        self.solver.input(14, 14, "cx")
        self.assertEqual(self.solver.state.user_input["14-14"], "C")

    def test_input_into_empty_cell_is_ignored(self) -> None:
        self.assertIsNone(self.solver.input(0, 0, "x"))
        self.assertEqual(self.solver.state.user_input, {})


class RevealResetTests(unittest.TestCase):
    def test_reveal_fills_every_cell(self) -> None:
        solver = InteractiveSolver(gato_casa())
        solver.check()
        solver.reveal()
        self.assertEqual(solver.state.user_input, ANSWERS)
        self.assertFalse(solver.state.checking)
        self.assertTrue(solver.is_solved())

    def test_reveal_then_reset_returns_initial_state(self) -> None:
        solver = InteractiveSolver(gato_casa())
        solver.select(15, 14)
        solver.input(15, 14, "a")
        solver.check()
        solver.reveal()
        solver.reset()
        self.assertEqual(solver.state, SolverState())

    def test_load_discards_progress(self) -> None:
        solver = InteractiveSolver(gato_casa())
        solver.select(15, 13)
        solver.input(15, 13, "g")
        other = gato_casa()
        solver.load(other)
        self.assertIs(solver.puzzle, other)
        self.assertEqual(solver.state, SolverState())


class NextCellTests(unittest.TestCase):
    def test_follows_letters_only(self) -> None:
        grid = gato_casa().grid
        self.assertEqual(next_cell_in_direction(15, 13, Direction.ACROSS, grid), (15, 14))
        self.assertEqual(next_cell_in_direction(14, 14, Direction.DOWN, grid), (15, 14))
        self.assertIsNone(next_cell_in_direction(17, 14, Direction.DOWN, grid))
        self.assertIsNone(next_cell_in_direction(15, 13, Direction.DOWN, grid))

    def test_stops_at_grid_edge(self) -> None:
        grid = GridModel(30)
        grid.write_word(PlacedWord("SOL", "Estrela", 0, 27, Direction.ACROSS), 1)
        self.assertIsNone(next_cell_in_direction(0, 29, Direction.ACROSS, grid))


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
