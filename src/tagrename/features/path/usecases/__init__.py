"""File name generation use cases."""
