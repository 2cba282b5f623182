"""Project infrastructure: logging and storage paths."""
