"""Domain errors raised by the functional core."""


class TodoError(Exception):
    """Base class for errors surfaced to the user."""

    pass


class InvalidDate(TodoError):
    """Raised when a date expression is neither absolute nor relative."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(
            f"Invalid date '{token}'. Expected YYYY-MM-DD, YYYY/MM/DD, or +3d, +2w, +1m, +1y"
        )


class InvalidDuration(TodoError):
    """Raised when an age filter is not of the form +N[dwmy]."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(
            f"Invalid age filter '{token}'. Use a format like +1d, +2w, +3m, or +1y "
            "(d = days, w = weeks, m = months, y = years)"
        )


class PositionOutOfRange(TodoError):
    """Raised when a command targets a position that does not exist."""

    def __init__(self, position: int):
        self.position = position
        super().__init__(f"Todo item {position} does not exist")


class AlreadyDone(TodoError):
    """Raised when marking a task done twice."""

    def __init__(self, position: int):
        self.position = position
        super().__init__(f"Todo item {position} is already marked as done")


class InvalidPriority(TodoError):
    """Raised for a priority outside A-Z / clear."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Invalid priority '{value}'. Priority must be a single letter (A-Z) or 'clear'")


class ConversionError(TodoError):
    """Raised when a todo.txt line cannot be converted."""

    pass
