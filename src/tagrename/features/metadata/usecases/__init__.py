"""Metadata use cases: sniffing, tag extraction and concurrent reading."""
