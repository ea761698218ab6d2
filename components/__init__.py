# Components module
from .sidebar import init_sidebar_state, render_layer_control

__all__ = ["init_sidebar_state", "render_layer_control"]
