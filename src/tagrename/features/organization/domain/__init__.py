"""Album aggregate domain model."""
