from .api import Api
from .database import Database
from .functions import Functions
from .messaging import Messaging

__all__ = ["Api", "Database", "Functions", "Messaging"]
