from __future__ import annotations

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

from data_workbench.core.base_view import BaseView


class HistogramView(BaseView):
    """
    Distribution of the active column over the preview rows.
    """

    id = "histogram"
    label = "Histogram"

    def compute_data(self) -> pd.DataFrame:
        return self.context.histogram_bins

    def render_figure(self, data: pd.DataFrame) -> go.Figure:
        if data is None or data.empty:
            return self.empty_figure("Select a numeric column to see charts.")

        column = self.context.active_column
        fig = px.bar(data.assign(bin=data["bin"].round(2)), x="bin", y="count")
        fig.update_layout(
            height=320,
            margin=dict(l=40, r=20, t=40, b=40),
            title=f"{column} ({int(data['count'].sum())} values)",
            xaxis_title=column,
            yaxis_title="Count",
            bargap=0.05,
        )
        return fig
