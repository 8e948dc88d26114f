"""
maze_chase — A terminal maze-chase game.

Eat every dot in the maze while randomly wandering ghosts roam it.

  constants  – ANSI codes, maze symbols, directions, glyph sets, timing.
  errors     – LoadError, BoundsError.
  maze       – Cell kinds, Maze grid, load_maze().
  engine     – move() primitive shared by every entity.
  entities   – Player and Ghost classes.
  config     – Glyphs, load_config() for the JSON glyph file.
  game       – Game controller / tick state machine, load_game().
  renderer   – ANSI frame composition.
  terminal   – raw_mode(), key decoding, background key reader.
"""
