"""Directory rename feature."""
