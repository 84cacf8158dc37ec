"""testing-example

A small demonstration module for a content-management site: a value-holding
`Unit` class plus in-memory stand-ins for the site collaborators (content,
taxonomy, users and roles, files, a simulated browser) that its functional
tests drive.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
