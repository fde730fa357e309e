"""Album grouping used to size track number padding."""
