from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Optional

import plotly.graph_objs as go

from .dataset import Dataset
from .interaction_state import InteractionState
from .layout import ScaleSet


@dataclass(frozen=True)
class MarkStyle:
    """
    Visual state of one mark (scatter circle or parallel polyline).

    stroke is None for "no outline".
    """
    stroke: Optional[str]
    stroke_width: float
    opacity: float
    selected: bool = False
    hovered: bool = False


class BaseView(ABC):
    """
    Abstract base class for all plot views.

    Defines the contract that every view in the app must follow
    - expose an 'id' - used internally and as the Dash graph id suffix
    - expose a 'label' - used for UI/human-readable applications
    - implement 'compute_data' - used to compute the marks for the current InteractionState
    - implement 'render_figure' - used to render the figure using Plotly

    Views that take part in selection/highlight also implement the
    subscriber hooks below; InteractionManager calls them after every
    state change. The defaults do nothing, which is right for static views.
    """

    id: str = None
    label: str = None
    interactive: bool = False

    def __init__(self, dataset: Dataset, scales: ScaleSet):
        self.dataset = dataset
        self.scales = scales

    @abstractmethod
    def compute_data(self, state: InteractionState) -> Any:
        """
        Compute the marks for the current InteractionState
        :param state: the current {@link InteractionState}
        :return: data: a dataframe with one row per mark
        """
        raise NotImplementedError()

    @abstractmethod
    def render_figure(self, data: Any, state: InteractionState) -> go.Figure:
        """
        Render the figure given the computed data
        :param data: the data provided by {@link compute_data()}
        :param state: the current {@link InteractionState}
        :return: the Plotly figure for these parameters
        """
        raise NotImplementedError()

    # ------------------------------------------------------------------
    # Subscriber hooks (InteractionManager -> view)
    # ------------------------------------------------------------------
    def restyle(self, state: InteractionState) -> None:
        pass

    def highlight(self, record_id: str, state: InteractionState) -> None:
        pass

    def unhighlight(self, record_id: str, state: InteractionState) -> None:
        pass

    def rezoom(self, state: InteractionState) -> None:
        pass

    # ------------------------------------------------------------------
    # Common helpers for all views
    # ------------------------------------------------------------------
    def figure(self, state: InteractionState) -> go.Figure:
        """compute_data + render_figure in one call."""
        return self.render_figure(self.compute_data(state), state)

    @staticmethod
    def empty_figure(message: str) -> go.Figure:
        """
        Standardised 'no data' figure used by all views.
        """
        fig = go.Figure()
        fig.update_layout(
            title=message,
            xaxis={"visible": False},
            yaxis={"visible": False},
        )
        return fig


class InteractiveView(BaseView):
    """
    Base for views whose marks reflect selection, brush filter and hover.

    Keeps one MarkStyle per record id. Every style is a pure function of
    (id, state, hovered), so re-applying the same state gives the same
    styles.
    """

    interactive = True

    def __init__(self, dataset: Dataset, scales: ScaleSet):
        super().__init__(dataset, scales)
        self._styles: Dict[str, MarkStyle] = {}
        self.restyle(InteractionState())

    @abstractmethod
    def style_for(self, record_id: str, state: InteractionState, hovered: bool) -> MarkStyle:
        raise NotImplementedError()

    def restyle(self, state: InteractionState) -> None:
        self._styles = {
            rid: self.style_for(rid, state, hovered=state.is_hovered(rid))
            for rid in self.dataset.by_id
        }

    def highlight(self, record_id: str, state: InteractionState) -> None:
        if record_id in self._styles:
            self._styles[record_id] = self.style_for(record_id, state, hovered=True)

    def unhighlight(self, record_id: str, state: InteractionState) -> None:
        if record_id in self._styles:
            self._styles[record_id] = self.style_for(record_id, state, hovered=False)

    def style_of(self, record_id: str) -> MarkStyle:
        return self._styles[record_id]

    def mark_styles(self) -> Dict[str, MarkStyle]:
        return dict(self._styles)
