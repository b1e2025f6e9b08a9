"""UNDERBAR test suite.

Folder taxonomy
- unit/         : Isolated checks of a single library module, plus the CLI helpers.
- e2e/          : The `underbar` command driven through Click's CliRunner.

General guidance
- Keep unit tests deterministic; seed every random source and use a private
  `timer_queue` fixture for delayed calls.
- Property-based tests live with the layer they exercise and use @pytest.mark.property.
- Markers: unit, e2e, property, slow
"""
