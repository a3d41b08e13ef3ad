"""Input handling, readouts and the arcade window."""
