"""testing-example test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- contract/     : Behaviour every implementation of an interface must honour.
- functional/   : User stories driven through the simulated browser and the CLI help.
- e2e/          : The installed CLI end to end (logging flags, demo command).
- fixtures/     : Shared pytest fixtures (no tests here).

General guidance
- Keep unit fast and deterministic; prefer the in-memory site over mocks.
- Functional asserts user-observable results (status codes, titles, markup).
- Contract parametrizes implementations to ensure consistent behavior.
- Property-based tests live with the layer they exercise and use @pytest.mark.property.
"""
