"""Feature slices: metadata, path naming, album organization, renaming."""
