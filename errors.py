class EventManagementError(Exception):
    """Base class for recoverable errors reported back to the user."""
    message = "Operation failed"

    def __init__(self, message: str | None = None):
        self.message = message or self.message
        super().__init__(self.message)


class InvalidCredentials(EventManagementError):
    message = "Invalid credentials"


class InvalidEventId(EventManagementError):
    message = "Invalid event ID"


class InvalidCategory(EventManagementError):
    message = "Invalid category"


class InvalidRating(EventManagementError):
    message = "Invalid rating. Please enter a number between 1 and 5"


class InvalidCapacity(EventManagementError):
    message = "Capacity must be positive"


class InvalidMenuChoice(EventManagementError):
    message = "Invalid choice. Please try again"


class PermissionDenied(EventManagementError):
    message = "Access denied: admin only"
