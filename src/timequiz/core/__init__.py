"""Core domain layer — clock values, questions, and the quiz loop.

Pure Python only: no terminal I/O, no subprocesses, no third-party
imports.  The CLI layer injects readers and writers.
"""
