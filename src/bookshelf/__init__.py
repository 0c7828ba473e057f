# ABOUTME: Bookshelf - a personal book catalog backed by SQLite.
# ABOUTME: The db package holds storage, dsl the lookup-then-update expressions, cli the commands.
