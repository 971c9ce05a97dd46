"""Application layer: ports and services for token lifecycle management."""
