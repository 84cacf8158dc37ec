"""Service layer for testing-example.

Operations built on the collaborator interfaces: field-creation helpers,
the browser assertion session, and the article site scenario.

Dependency rule: depends on `testing_example.interfaces` only; concrete
adapters are wired in by `testing_example.bootstrap`.
"""
