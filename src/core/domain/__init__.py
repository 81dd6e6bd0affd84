"""Domain models and errors.

The domain knows nothing about subprocesses, files or the CLI: only devices,
capabilities and the ways a listing can fail.
"""
