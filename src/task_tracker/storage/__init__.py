"""Key/value storage backends."""
