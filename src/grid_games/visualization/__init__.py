"""pygame host for the grid games: rendering, input mapping and timing."""
