from respect.core.diff.models import Diff
from respect.core.diff.recorder import DiffRecorder

__all__ = ["Diff", "DiffRecorder"]
