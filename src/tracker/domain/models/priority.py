from enum import Enum


class Priority(str, Enum):
    """Urgency level of a task, lowest first."""

    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    URGENT = "URGENT"
