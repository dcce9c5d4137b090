"""UTILKIT test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- contract/     : Behavior every DOM backend must share, parametrized over backends.
- functional/   : User-visible flows (help, version) at the CLI boundary.
- e2e/          : Full CLI invocations through Click's CliRunner, logging included.

General guidance
- Keep unit fast and deterministic (no real I/O); drive animations with
  ManualFrameScheduler rather than real time.
- Functional and e2e tests assert user-observable results, not internals.
- Contract fixtures parametrize implementations to ensure consistent behavior.
- Property-based tests live with the layer they exercise and use @pytest.mark.property.
- Markers: unit, contract, functional, e2e, property, slow
"""
