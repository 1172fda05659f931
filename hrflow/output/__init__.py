"""Text and JSON rendering of results."""
