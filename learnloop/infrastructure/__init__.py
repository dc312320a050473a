"""Infrastructure layer: event delivery, storage adapters and dependency wiring."""
