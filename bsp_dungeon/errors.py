class GenerationError(RuntimeError):
    """Raised when a dungeon cannot be generated from the given parameters."""
