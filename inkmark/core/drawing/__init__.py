"""
Gesture capture: coordinates, tool parameters and the drawing state machine.
"""
from .coordinates import Point, SurfaceRect, to_surface_coords
from .tool_state import Tool, ToolState
from .state_machine import (
    DEFAULT_COMMENT_TEXT,
    DrawingGesture,
    DrawingStateMachine,
    GestureState,
)

__all__ = [
    'Point',
    'SurfaceRect',
    'to_surface_coords',
    'Tool',
    'ToolState',
    'DEFAULT_COMMENT_TEXT',
    'DrawingGesture',
    'DrawingStateMachine',
    'GestureState',
]
