from .depth import DepthStats, vertex_depths, depth_counts, depth_stats
from .degree import DegreeStats, in_degrees, degree_stats
from .temporal import TemporalStats, timestamps, temporal_stats
from .report import Report, compute_report

__all__ = [
    "DepthStats",
    "vertex_depths",
    "depth_counts",
    "depth_stats",
    "DegreeStats",
    "in_degrees",
    "degree_stats",
    "TemporalStats",
    "timestamps",
    "temporal_stats",
    "Report",
    "compute_report",
]
