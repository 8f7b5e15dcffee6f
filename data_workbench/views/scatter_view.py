from __future__ import annotations

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

from data_workbench.core.base_view import BaseView
from data_workbench.core.charts import scatter_frame


class ScatterView(BaseView):
    """
    Scatter of the chosen x/y axis columns. Only rows where both values are
    numeric are plotted.
    """

    id = "scatter"
    label = "Scatter"

    def compute_data(self) -> pd.DataFrame:
        return scatter_frame(self.context.scatter)

    def render_figure(self, data: pd.DataFrame) -> go.Figure:
        if data is None or data.empty:
            return self.empty_figure("Choose two numeric columns for the scatter plot.")

        x_col, y_col = self.context.x_col, self.context.y_col
        fig = px.scatter(data, x="x", y="y")
        fig.update_layout(
            height=320,
            margin=dict(l=40, r=20, t=40, b=40),
            title=f"{y_col} vs {x_col} ({len(data)} points)",
            xaxis_title=x_col,
            yaxis_title=y_col,
        )
        return fig
