"""Interfaces (application boundary) for testing-example.

Defines framework-free contracts for the site collaborators the functional
tests drive: files, taxonomy, users and roles, content authoring and the
simulated browser, along with the small frozen snapshots they exchange.

Dependency rule: this package is independent; do not import from other
`testing_example.*` modules. It may be imported by
`testing_example.service_layer`, `testing_example.adapters`, and
`testing_example.bootstrap`.
"""
