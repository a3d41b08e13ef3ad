"""Movement core: state, loop owner and event bus."""
