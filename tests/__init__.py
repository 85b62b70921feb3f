"""TRASHPANDA test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single helper module.
- functional/   : The ``trashpanda`` command line, tested end-to-end via CliRunner.

General guidance
- Keep unit tests fast and deterministic; seed or patch randomness.
- Functional tests assert user-observable output, not internals.
- Markers: unit, functional (applied automatically by directory).
"""
