"""Tree building and navigation core."""
