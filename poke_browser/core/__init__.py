"""
Core domain layer: records and dataset, scales and layout, interaction state
and its manager, view base class, and the view registry
"""

from .dataset import Dataset
from .record import Record
from .interaction_state import InteractionState
from .interaction_manager import InteractionManager
from .base_view import BaseView, InteractiveView
from .view_registry import ViewRegistry

__all__ = [
    "Dataset",
    "Record",
    "InteractionState",
    "InteractionManager",
    "BaseView",
    "InteractiveView",
    "ViewRegistry",
]
