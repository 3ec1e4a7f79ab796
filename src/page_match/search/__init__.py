"""Query parsing, text preparation, and boundary matching."""
