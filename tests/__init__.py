"""assegai-util test suite.

Folder taxonomy
- unit/        : One module at a time; ``unit/path`` covers the path engine.
- functional/  : Several operations chained the way a caller uses them, plus
                 the help text a new user sees.
- e2e/cli/     : The installed command line, driven through CliRunner.

Markers (``unit``, ``functional``, ``e2e``) are added from the directory by
``tests/conftest.py``. Hypothesis tests set ``pytestmark = [pytest.mark.property]``.
Path tests pin the current directory through a `ResolutionContext` and never
depend on the machine running them.
"""
