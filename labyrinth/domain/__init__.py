"""Grid model, maze generators and search algorithms."""
