import matplotlib.pyplot as plt
import numpy as np

from matplotlib.axes import Axes

from geometry import Point


def to_array(points: list[Point]) -> np.ndarray:
    """
    Float coordinates of points as an (n, 2) array. Used for drawing only.
    """
    if len(points) == 0:
        return np.empty((0, 2), dtype=float)
    return np.array([(float(p.x), float(p.y)) for p in points], dtype=float)


def plot_points(points: list[Point], ax: Axes | None = None, **kwargs):
    xy = to_array(points)
    if ax is None:
        ax = plt.gca()
    return ax.scatter(xy[:, 0], xy[:, 1], **kwargs)


def plot_hull(hull: list[Point], ax: Axes | None = None, color: str = 'r'):
    """
    Draw the closed hull boundary and its vertices.
    """
    if ax is None:
        ax = plt.gca()
    xy = to_array(hull)
    if len(xy) > 1:
        closed = np.vstack([xy, xy[:1]])
        ax.plot(closed[:, 0], closed[:, 1], c=color)
    ax.scatter(xy[:, 0], xy[:, 1], c=color, s=8)
    return ax
