"""Entrypoints (inbound adapters) for testing-example.

Expose the project to the outside world: currently the `testing-example`
CLI. Parse inputs, call the service layer, and present results.

Dependency rule: may import `testing_example.service_layer` and
`testing_example.bootstrap`; avoid importing `testing_example.adapters`
directly.
"""
