"""
Domain errors.
"""


class FieldFullError(RuntimeError):
    """Raised when no free cell is left on the game field."""

    def __init__(self, width: int, height: int):
        super().__init__(f"No free position left on a {width}x{height} field.")
        self.width = width
        self.height = height
