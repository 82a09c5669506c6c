"""NetworkX views over the in-memory graph state."""
