"""CWVER test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- integration/  : The bootstrapped application (real handlers, clock and bus) together.
- functional/   : User-visible flows and features tested end-to-end at the boundary.
- e2e/          : The top-level command with its logging flags, as a user runs it.

General guidance
- Keep unit fast and deterministic (no real I/O); prefer fakes (e.g. FixedClock)
  over mocks at boundaries.
- Functional asserts user-observable results, not internals.
- Property-based tests live with the layer they exercise and use @pytest.mark.property.
"""
