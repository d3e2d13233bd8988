"""Solutions to individual puzzles, one module per year and day."""