"""Word-boundary query matching for page titles and URLs."""
