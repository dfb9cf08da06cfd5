"""Domain errors raised by the service layer.

The API layer maps these onto HTTP responses (see api/main.py).
"""


class EventNotFoundError(Exception):
    """No event exists with the requested id."""

    def __init__(self, event_id: int):
        self.event_id = event_id
        super().__init__(f"Event not found with id: {event_id}")
