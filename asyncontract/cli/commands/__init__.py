# asyncontract/cli/commands/__init__.py
"""CLI commands. Imported lazily by asyncontract.cli.cli."""
