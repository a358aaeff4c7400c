from .hire_record_factory import HireDetails, HireRecordFactory

__all__ = ["HireDetails", "HireRecordFactory"]
