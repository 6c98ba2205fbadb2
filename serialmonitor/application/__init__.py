"""Application layer - use cases coordinating the domain."""
