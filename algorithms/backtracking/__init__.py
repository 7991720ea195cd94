"""
algorithms/backtracking/
------------------------
Grid-family backtracking producers: N-Queens, rat in a maze, Sudoku.
"""
