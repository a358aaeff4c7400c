from .exceptions import (
    AlreadyProcessedError,
    DatesAlreadyHiredError,
    InvalidTransitionError,
)

__all__ = ["AlreadyProcessedError", "DatesAlreadyHiredError", "InvalidTransitionError"]
