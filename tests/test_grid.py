import unittest

from edu_crossword.core.constants import Direction
from edu_crossword.core.models import Cell, Clue, ClueList, PlacedWord, Puzzle
from edu_crossword.engine.grid import GridModel
from edu_crossword.engine.numbering import ClueNumberer
from edu_crossword.engine.validator import GridValidator


class GridModelTests(unittest.TestCase):
    def test_new_grid_is_empty(self) -> None:
        grid = GridModel(30)
        self.assertEqual(grid.filled_count, 0)
        self.assertEqual(list(grid.cells()), [])
        self.assertIsNone(grid.cell(0, 0))
        self.assertIsNone(grid.cell(-1, 5))
        self.assertIsNone(grid.cell(30, 0))

    def test_rejects_non_positive_size(self) -> None:
        with self.assertRaises(ValueError):
            GridModel(0)

    def test_write_word_tags_cells(self) -> None:
        grid = GridModel(30)
        grid.write_word(PlacedWord("GATO", "Animal", 15, 13, Direction.ACROSS), 1)
        grid.write_word(PlacedWord("CASA", "Lar", 14, 14, Direction.DOWN), 2)

        self.assertEqual(grid.cell(15, 13), Cell(letter="G", clue_number=1, across=1))
        self.assertEqual(grid.cell(15, 14), Cell(letter="A", across=1, down=2))
        self.assertEqual(grid.cell(14, 14), Cell(letter="C", clue_number=2, down=2))
        self.assertEqual(grid.filled_count, 7)
        self.assertEqual(grid.read_word(14, 14, Direction.DOWN, 4), "CASA")
        self.assertEqual(grid.read_word(15, 13, Direction.ACROSS, 5), "GATO?")

    def test_cells_iterates_row_major(self) -> None:
        grid = GridModel(30)
        grid.write_word(PlacedWord("LUA", "Satélite", 2, 4, Direction.DOWN), 1)
        self.assertEqual([(r, c, cell.letter) for r, c, cell in grid.cells()],
                         [(2, 4, "L"), (3, 4, "U"), (4, 4, "A")])

    def test_json_shape_uses_original_cell_keys(self) -> None:
        grid = GridModel(30)
        grid.write_word(PlacedWord("SOL", "Estrela", 0, 0, Direction.ACROSS), 1)
        rows = grid.to_jsonable()
        self.assertEqual(len(rows), 30)
        self.assertEqual(rows[0][0], {"letter": "S", "clueNumber": 1, "across": 1})
        self.assertEqual(rows[0][1], {"letter": "O", "across": 1})
        self.assertIsNone(rows[1][0])

    def test_puzzle_reloads_from_json(self) -> None:
        grid = GridModel(30)
        grid.write_word(PlacedWord("SOL", "Estrela", 0, 0, Direction.ACROSS), 1)
        puzzle = Puzzle(grid, ClueList(across=[Clue(1, "Estrela")]))
        reloaded = Puzzle.from_jsonable(puzzle.to_jsonable())
        self.assertEqual(reloaded.grid.cell(0, 2), Cell(letter="L", across=1))
        self.assertEqual(reloaded.clues.across, [Clue(1, "Estrela")])
        self.assertEqual(reloaded.clues.down, [])

    def test_from_jsonable_rejects_ragged_rows(self) -> None:
        with self.assertRaises(ValueError):
            GridModel.from_jsonable([[None, None], [None]])


class ClueNumbererTests(unittest.TestCase):
    def test_assigns_sequential_numbers(self) -> None:
        numbering = ClueNumberer()
        self.assertEqual(numbering.number_for(15, 13), 1)
        self.assertEqual(numbering.number_for(14, 14), 2)
        self.assertEqual(numbering.next_number, 3)

    def test_reuses_number_for_same_start(self) -> None:
        numbering = ClueNumberer()
        first = numbering.number_for(15, 12)
        self.assertEqual(numbering.number_for(15, 12), first)
        self.assertEqual(numbering.next_number, 2)
        self.assertIn("15-12", numbering)

    def test_instances_are_independent(self) -> None:
        a, b = ClueNumberer(), ClueNumberer()
        a.number_for(0, 0)
        a.number_for(0, 1)
        self.assertEqual(b.number_for(5, 5), 1)


class GridValidatorTests(unittest.TestCase):
    def setUp(self) -> None:
        self.grid = GridModel(30)
        self.placed = [
            PlacedWord("GATO", "Animal", 15, 13, Direction.ACROSS),
            PlacedWord("CASA", "Lar", 14, 14, Direction.DOWN),
        ]
        self.grid.write_word(self.placed[0], 1)
        self.grid.write_word(self.placed[1], 2)
        self.clues = ClueList(across=[Clue(1, "Animal")], down=[Clue(2, "Lar")])

    def test_valid_grid_passes(self) -> None:
        result = GridValidator().validate(self.grid, self.clues, self.placed)
        self.assertTrue(result.ok)
        self.assertEqual(result.messages, [])

    def test_detects_letter_mismatch(self) -> None:
        self.placed[1] = PlacedWord("CESA", "Lar", 14, 14, Direction.DOWN)
        result = GridValidator().validate(self.grid, self.clues, self.placed)
        self.assertFalse(result.ok)
        self.assertIn("CESA", result.messages[0])

    def test_detects_unowned_letter(self) -> None:
        result = GridValidator().validate(self.grid, self.clues, self.placed[:1])
        self.assertFalse(result.ok)
        self.assertIn("belongs to no word", result.messages[0])

    def test_detects_missing_start_cell(self) -> None:
        self.clues.down.append(Clue(7, "Fantasma"))
        result = GridValidator().validate(self.grid, self.clues, self.placed)
        self.assertFalse(result.ok)
        self.assertIn("Clue 7", result.messages[0])

    def test_detects_touching_words(self) -> None:
        extra = PlacedWord("PE", "Parte do corpo", 14, 15, Direction.ACROSS)
        self.grid.write_word(extra, 3)
        self.placed.append(extra)
        self.clues.across.append(Clue(3, "Parte do corpo"))
        result = GridValidator().validate(self.grid, self.clues, self.placed)
        self.assertFalse(result.ok)
        self.assertIn("touch outside a word", result.messages[0])


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
