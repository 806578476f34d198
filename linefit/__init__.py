from .errors import (
    LinefitError,
    MalformedRecord,
    ReadFailure,
    RenderFailure,
    SourceUnavailable,
)
from .points import Point, load_points, parse_point, read_points
from .regression import (
    Model,
    Strategy,
    cost,
    descend,
    fit,
    gradient,
    gradient_descent,
    grid_axis,
    grid_search,
)
from .calibration import cost_trace, is_monotonic
from .config import Settings
from .render import r_squared, render_fit

__all__ = [
    "LinefitError",
    "MalformedRecord",
    "ReadFailure",
    "RenderFailure",
    "SourceUnavailable",
    "Point",
    "load_points",
    "parse_point",
    "read_points",
    "Model",
    "Strategy",
    "cost",
    "descend",
    "fit",
    "gradient",
    "gradient_descent",
    "grid_axis",
    "grid_search",
    "cost_trace",
    "is_monotonic",
    "Settings",
    "render_fit",
    "r_squared",
]
