"""Static runtime settings for tagrename."""
