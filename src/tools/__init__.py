"""Developer-facing tools for the Sudoku project."""
