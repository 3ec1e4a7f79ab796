"""Services built on top of the matcher."""
