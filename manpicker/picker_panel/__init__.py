"""Public picker-panel controller exports."""

from .controller import PickerDeps, PickerOps

__all__ = ["PickerDeps", "PickerOps"]
