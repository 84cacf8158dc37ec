"""Adapters for testing-example.

Concrete implementations of the collaborator interfaces. The `memory`
subpackage holds the in-memory site used by tests, the demo CLI and local
experiments.
"""
