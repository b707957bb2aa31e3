from .triangle_plotting import plot_triangles
