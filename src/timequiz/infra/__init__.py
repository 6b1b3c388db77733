"""Infrastructure layer — adapters around the operating system.

May import from ``core`` and ``exceptions`` but never from ``cli``.
"""
