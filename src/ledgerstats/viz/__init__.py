from .draw import depth_layout, draw_dag

__all__ = [
    "depth_layout",
    "draw_dag",
]
