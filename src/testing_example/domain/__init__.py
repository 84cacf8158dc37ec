"""Domain layer for testing-example.

Holds the plain value objects of the module. This package is deliberately
framework-agnostic.

Dependency rule: do not import from `testing_example.adapters` or
`testing_example.entrypoints`.
"""

from .unit import Unit

__all__ = ["Unit"]
