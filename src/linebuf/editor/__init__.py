"""Line editing session over an opened text buffer."""

from .line_editor import LineEditor

__all__ = ["LineEditor"]
