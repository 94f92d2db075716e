from typing import Optional

# Scheduling errors, mapped to HTTP responses by the handlers in main.py

class SchedulingError(Exception):
    status_code = 500
    error = "Internal Server Error"

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.field = field

    def to_dict(self) -> dict:
        content = {"error": self.error, "message": self.message}
        if self.field:
            content["field"] = self.field
        return content

class InvalidRequest(SchedulingError):
    status_code = 400
    error = "Bad Request"

class ResourceNotFound(SchedulingError):
    status_code = 404
    error = "Not Found"

class ResourceConflict(SchedulingError):
    status_code = 409
    error = "Conflict"

class SlotConflict(ResourceConflict):
    def __init__(self, message: str = "This time slot is already booked for this patient"):
        super().__init__(message)
