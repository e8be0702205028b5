"""Infrastructure adapters for tzconv."""
