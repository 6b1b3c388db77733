"""Allow ``python -m timequiz`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m timequiz`` behaves identically to the ``timequiz``
console script.
"""

from __future__ import annotations

from timequiz.cli.app import cli

if __name__ == "__main__":
    cli()
