from .guide_repository import GuideRepository

__all__ = ["GuideRepository"]
