# errors.py


class InvariantViolation(RuntimeError):
    """Raised when the game core is driven outside its contract (programmer error)."""
