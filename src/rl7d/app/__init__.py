"""Interactive arcade front end for rl7d."""
