"""pivotal-cli API package."""
