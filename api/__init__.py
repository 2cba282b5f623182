"""HTTP control surface for a single local match."""
