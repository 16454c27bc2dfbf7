"""Allow ``python -m rotten_issues``."""

from .cli.main import app

app(prog_name="rotten-issues")
