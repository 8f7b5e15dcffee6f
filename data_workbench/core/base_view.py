from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

import plotly.graph_objs as go

from .context import ExplorationContext


class BaseView(ABC):
    """
    Abstract base class for all chart views.

    Defines the contract that every view in the app must follow
    - expose an 'id' - used internally
    - expose a 'label' - used for UI/human-readable applications
    - implement 'compute_data' - read the derived series from the ExplorationContext
    - implement 'render_figure' - used to render the figure using Plotly

    Views are pure readers: they never mutate the context.
    """

    id: str = None
    label: str = None

    def __init__(self, context: ExplorationContext):
        self.context = context

    @abstractmethod
    def compute_data(self) -> Any:
        """
        Pull the data this view plots from the context
        :return: data: usually a dataframe, empty when there is nothing to plot
        """
        raise NotImplementedError()

    @abstractmethod
    def render_figure(self, data: Any) -> go.Figure:
        """
        Render the figure given the computed data
        :param data: the data provided by {@link compute_data()}
        :return: the Plotly figure
        """
        raise NotImplementedError()

    def figure(self) -> go.Figure:
        return self.render_figure(self.compute_data())

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
