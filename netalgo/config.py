"""Configuration classes for netalgo components."""

from dataclasses import dataclass

from netalgo.lib.algorithms.base import NotifyPolicy


@dataclass
class AlgorithmConfig:
    """Defaults shared by the graph algorithms."""

    # Emit a debug progress line every N augmenting paths in max-flow
    progress_log_interval: int = 1000

    # Prim restarts from the next unvisited node when its frontier runs dry
    prim_span_forest: bool = True

    # Notification moment used by depth-first searchers built without one
    default_notify_policy: NotifyPolicy = NotifyPolicy.ON_ENTER

    def should_log_progress(self, augmentations: int) -> bool:
        """Return True when a progress line is due after `augmentations` paths."""
        if self.progress_log_interval <= 0:
            return False
        return augmentations > 0 and augmentations % self.progress_log_interval == 0


# Global configuration instance
ALGORITHM_CONFIG = AlgorithmConfig()
