"""Location Directory Service."""
