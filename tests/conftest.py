"""Global pytest fixtures for testing-example."""

pytest_plugins = [
    "tests.fixtures.site",
]
