import numpy as np
import matplotlib.pyplot as plt
from matplotlib.patches import Patch
from mpl_toolkits.mplot3d.art3d import Poly3DCollection

from data_types import Triangle

INTERSECTING_COLORS = ("tab:red", "tab:orange")
SEPARATE_COLORS = ("tab:blue", "tab:green")


def plot_triangles(triangle_1: Triangle, triangle_2: Triangle, intersect: bool = None,
                   title="Triangle Pair", figsize=(10, 8), ax=None, alpha=0.6,
                   edge_color='black', edge_width=1.0):
    """
    Plots two triangles on a 3D axis.

    Parameters
    ----------
    triangle_1, triangle_2 : Triangle
        The triangles to draw.

    intersect : bool, optional
        Result of the intersection test. Selects the colour scheme and is
        appended to the title. If None, the separate-pair colours are used.

    title : str, optional
        Title for the plot. Default is "Triangle Pair".

    figsize : tuple, optional
        Figure size as (width, height) in inches. Default is (10, 8).

    ax : matplotlib.axes.Axes, optional
        Existing 3D axes to plot on. If None, new figure and axes are created.

    alpha : float, optional
        Transparency of the triangle faces. Default is 0.6.

    Returns
    -------
    fig : matplotlib.figure.Figure
        The figure containing the plot.

    ax : matplotlib.axes.Axes
        The 3D axes containing the plot.
    """
    if ax is None:
        fig = plt.figure(figsize=figsize)
        ax = fig.add_subplot(111, projection='3d')
    else:
        fig = ax.figure

    colors = INTERSECTING_COLORS if intersect else SEPARATE_COLORS
    triangles = np.array([triangle_1.as_array(), triangle_2.as_array()])

    poly3d = Poly3DCollection(triangles, linewidths=edge_width, edgecolors=edge_color, alpha=alpha)
    poly3d.set_facecolor(colors)
    ax.add_collection3d(poly3d)

    ax.scatter(triangles[:, :, 0].ravel(), triangles[:, :, 1].ravel(), triangles[:, :, 2].ravel(),
               color=edge_color, s=10)

    # add_collection3d does not rescale the axes
    all_points = triangles.reshape(-1, 3)
    min_coords = all_points.min(axis=0)
    max_coords = all_points.max(axis=0)
    padding = np.maximum((max_coords - min_coords) * 0.1, 1e-3)
    ax.set_xlim(min_coords[0] - padding[0], max_coords[0] + padding[0])
    ax.set_ylim(min_coords[1] - padding[1], max_coords[1] + padding[1])
    ax.set_zlim(min_coords[2] - padding[2], max_coords[2] + padding[2])

    legend_elements = [
        Patch(facecolor=colors[0], edgecolor=edge_color, label="Triangle 1"),
        Patch(facecolor=colors[1], edgecolor=edge_color, label="Triangle 2"),
    ]
    ax.legend(handles=legend_elements, loc='upper right', frameon=True,
              fancybox=True, framealpha=0.7)

    if intersect is not None:
        title = f"{title} ({'intersecting' if intersect else 'not intersecting'})"
    ax.set_title(title)
    ax.set_xlabel("X")
    ax.set_ylabel("Y")
    ax.set_zlabel("Z")

    return fig, ax
