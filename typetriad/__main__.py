# ABOUTME: Allows running the CLI via `python -m typetriad`.
# ABOUTME: Delegates straight to the Typer app.

from typetriad.cli import app

app()
