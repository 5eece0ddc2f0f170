# visualization.py
from typing import Optional, Sequence
import matplotlib.pyplot as plt
import numpy as np

from boundary import BrainBoundary
from topics import Topic, UNASSIGNED_COLOR

def _ellipsoid_mesh(center, radii, resolution: int = 16):
    u = np.linspace(0, 2 * np.pi, resolution)
    v = np.linspace(0, np.pi, resolution)
    x = center[0] + radii[0] * np.outer(np.cos(u), np.sin(v))
    y = center[1] + radii[1] * np.outer(np.sin(u), np.sin(v))
    z = center[2] + radii[2] * np.outer(np.ones_like(u), np.cos(v))
    return x, y, z

def plot_neuron_layout(positions, boundary: Optional[BrainBoundary] = None,
                       topics: Optional[Sequence[Topic]] = None,
                       connections=None, save_path: Optional[str] = None):
    """
    Static 3D preview of a neuron layout.

    Args:
        positions: (n, 3) neuron positions
        boundary: Optional boundary drawn as ellipsoid wireframes
        topics: Optional topics, zipped with positions by index for colors
        connections: Optional TopicConnection list drawn as lines
        save_path: Write the figure here when given

    Returns:
        The matplotlib Figure.
    """
    points = np.asarray(positions, dtype=float).reshape(-1, 3)
    fig = plt.figure(figsize=(10, 8))
    ax = fig.add_subplot(111, projection='3d')

    if boundary is not None:
        for ellipsoid in boundary.ellipsoids:
            x, y, z = _ellipsoid_mesh(ellipsoid.center, ellipsoid.radii)
            ax.plot_wireframe(x, y, z, color='#8b5cf6', alpha=0.08, linewidth=0.5)

    colors = [UNASSIGNED_COLOR] * len(points)
    sizes = [20.0] * len(points)
    if topics:
        for i, topic in enumerate(topics[:len(points)]):
            colors[i] = topic.color
            sizes[i] = 20.0 + 60.0 * topic.intensity

    if len(points):
        ax.scatter(points[:, 0], points[:, 1], points[:, 2], c=colors, s=sizes, alpha=0.9)

    for connection in connections or []:
        xs, ys, zs = zip(connection.start, connection.end)
        ax.plot(xs, ys, zs, color=connection.color, alpha=connection.opacity, linewidth=1.0)

    ax.set_title(f'Neuron Layout ({len(points)} neurons)')
    ax.set_xlabel('x')
    ax.set_ylabel('y')
    ax.set_zlabel('z')
    plt.tight_layout()

    if save_path:
        fig.savefig(save_path, dpi=120)
    return fig
