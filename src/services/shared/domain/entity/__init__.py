from .aggregate import AggregateRoot
from .entity import Entity

__all__ = ["Entity", "AggregateRoot"]
