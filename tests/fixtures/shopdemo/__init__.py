"""Sample producer package used across the test suite."""
