"""timequiz — answer a clock-arithmetic question before a command runs.

A tiny gatekeeper CLI: it asks a random time question, keeps asking
until the answer is right, then executes the wrapped command.
"""

from timequiz.version import __version__

__all__: list[str] = ["__version__"]
