"""querylab test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- integration/  : Queries run against a real (in-memory or file) SQLite database.
- functional/   : CLI commands exercised as a user would run them.
- e2e/          : Top-level CLI behaviour (logging, verbosity, SQL echo).
- fixtures/     : Shared pytest fixtures (no tests here).

General guidance
- Each integration test gets a fresh database and runs inside a transaction
  that is rolled back at teardown.
- Assert on the rows the database returns, not on generated SQL text,
  unless the SQL shape is the point of the test.
- Property-based tests use @pytest.mark.property.
"""
