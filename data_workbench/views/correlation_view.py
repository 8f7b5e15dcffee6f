from __future__ import annotations

import pandas as pd
import plotly.graph_objects as go

from data_workbench.core.base_view import BaseView


class CorrelationView(BaseView):
    """
    Pearson correlation heatmap of the first numeric columns (at most 8),
    computed over the preview rows where all of them are numeric.
    """

    id = "correlation"
    label = "Correlation heatmap"

    def compute_data(self) -> pd.DataFrame:
        return self.context.correlation

    def render_figure(self, data: pd.DataFrame) -> go.Figure:
        if data is None or data.empty:
            return self.empty_figure("Not enough numeric data for a correlation heatmap.")

        cols = [str(c) for c in data.columns]
        fig = go.Figure(
            data=go.Heatmap(
                z=data.values,
                x=cols,
                y=cols,
                zmin=-1,
                zmax=1,
                colorscale="RdBu",
                reversescale=True,
                text=data.round(2).values,
                texttemplate="%{text}",
                hovertemplate="%{y} / %{x}: %{z:.2f}<extra></extra>",
            )
        )
        fig.update_layout(
            height=360,
            margin=dict(l=40, r=20, t=40, b=40),
            title="Correlation heatmap",
            yaxis={"autorange": "reversed"},
        )
        return fig
