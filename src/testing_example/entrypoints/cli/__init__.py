"""Command-line interface for testing-example."""
