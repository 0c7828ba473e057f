# ABOUTME: Subcommands of the bookshelf CLI, one module per command.
# ABOUTME: Each module exposes a Click command that cli/__init__.py registers.
