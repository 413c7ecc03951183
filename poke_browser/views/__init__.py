from .scatter_view import ScatterView
from .donut_view import DonutView
from .parallel_view import ParallelView

__all__ = ["ScatterView", "DonutView", "ParallelView"]
