from .coordinator import ResolutionCoordinator, ResolutionFailure
from .fetcher import PageFetcher

__all__ = ["PageFetcher", "ResolutionCoordinator", "ResolutionFailure"]
