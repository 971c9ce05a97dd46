"""Infrastructure layer: store implementations and observability."""
