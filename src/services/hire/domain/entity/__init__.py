from .hire_record import HireRecord

__all__ = ["HireRecord"]
