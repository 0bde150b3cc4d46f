"""
Plotting for simulation runs.

Draws the obstacles of a layer and the trajectory of every agent on it, seen
from above (world x against world z).
"""

import os
import logging
from typing import Optional

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
import numpy as np
import pandas as pd

from ..core.world import World

logger = logging.getLogger(__name__)


def plot_run(world: World, trace: pd.DataFrame, output_path: str, layer: Optional[int] = None) -> str:
    """
    Save a top-down plot of a run.

    Args:
        world: World the trace was recorded in
        trace: DataFrame as returned by Simulation.trace()
        output_path: Image file to write
        layer: Layer to draw; defaults to the layer of the first agent, or 0

    Returns:
        The path of the written image
    """
    if layer is None:
        layer = int(trace['layer'].iloc[0]) if not trace.empty else 0

    mapper = world.mapper
    fig, ax = plt.subplots(figsize=(8, 8))

    half_w = mapper.width * mapper.cell_size / 2.0
    half_h = mapper.height * mapper.cell_size / 2.0
    ax.add_patch(plt.Rectangle((-half_w, -half_h), 2 * half_w, 2 * half_h,
                               fill=False, edgecolor='grey', linestyle='--'))

    for obstacle in world.obstacles.on_layer(layer):
        x, _, z = mapper.grid_to_world(obstacle)
        ax.add_patch(plt.Rectangle((x - mapper.cell_size / 2.0, z - mapper.cell_size / 2.0),
                                   mapper.cell_size, mapper.cell_size, color='black', alpha=0.7))

    layer_trace = trace[trace['layer'] == layer]
    for agent_id, rows in layer_trace.groupby('agent_id'):
        rows = rows.sort_values('tick')
        xs, zs = rows['x'].to_numpy(), rows['z'].to_numpy()
        line, = ax.plot(xs, zs, label=str(agent_id))
        ax.scatter([xs[0]], [zs[0]], color=line.get_color(), marker='o')
        ax.scatter([xs[-1]], [zs[-1]], color=line.get_color(), marker='x')

    ticks = np.arange(-half_w, half_w + mapper.cell_size, mapper.cell_size)
    ax.set_xticks(ticks, minor=True)
    ax.set_yticks(np.arange(-half_h, half_h + mapper.cell_size, mapper.cell_size), minor=True)
    ax.grid(which='minor', alpha=0.2)
    ax.set_aspect('equal')
    ax.set_xlabel("World X")
    ax.set_ylabel("World Z")
    ax.set_title(f"{world.name} (layer {layer})")
    if not layer_trace.empty:
        ax.legend(loc='upper right')

    directory = os.path.dirname(output_path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    fig.savefig(output_path, bbox_inches='tight')
    plt.close(fig)
    logger.info(f"Saved plot to {output_path}")
    return output_path
