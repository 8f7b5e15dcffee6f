from .histogram_view import HistogramView
from .scatter_view import ScatterView
from .correlation_view import CorrelationView

__all__ = ["HistogramView", "ScatterView", "CorrelationView"]
