"""2D rendering of particles and quadtree regions using matplotlib."""

import numpy as np
import matplotlib
import matplotlib.pyplot as plt
from matplotlib.collections import PatchCollection
from matplotlib.figure import Figure
from matplotlib.patches import Rectangle as RectPatch
from typing import Dict, Optional, Sequence, Tuple

from gravity_sim.geometry.rectangle import Rectangle
from gravity_sim.physics.diagnostics import particle_arrays
from gravity_sim.quadtree.direction import Path


class RegionRenderer:
    """Draws the field, the quadtree cells of the last step and the particles."""

    def __init__(
        self,
        width: float,
        height: float,
        figsize: Tuple[int, int] = (8, 8),
        dpi: int = 100,
        show_regions: bool = True,
        size_by_mass: bool = True,
        interactive: bool = False,
    ):
        """Initialize renderer.

        Args:
            width: Field width
            height: Field height
            figsize: Figure size (width, height)
            dpi: Dots per inch
            show_regions: Draw quadtree cell outlines
            size_by_mass: Size particles by mass
            interactive: Show a window instead of drawing off-screen
        """
        self.width = width
        self.height = height
        self.figsize = figsize
        self.dpi = dpi
        self.show_regions = show_regions
        self.size_by_mass = size_by_mass
        self.interactive = interactive

        self.fig: Optional[Figure] = None
        self.ax = None
        self.initialized = False

    def _initialize(self):
        if self.initialized:
            return
        if not self.interactive:
            matplotlib.use("Agg")
        self.fig, self.ax = plt.subplots(figsize=self.figsize, dpi=self.dpi)
        self.initialized = True
        if self.interactive:
            plt.show(block=False)

    def render(self, particles: Sequence, regions: Optional[Dict[Path, Rectangle]] = None, title: str = ""):
        """Render one frame.

        Args:
            particles: Particles to draw
            regions: Region map returned by a simulation step
            title: Optional axis title
        """
        self._initialize()
        ax = self.ax
        ax.clear()
        ax.set_xlim(0, self.width)
        # Screen convention: north (small y) at the top
        ax.set_ylim(self.height, 0)
        ax.set_aspect('equal')
        ax.set_title(title or 'Barnes-Hut quadtree')

        if self.show_regions and regions:
            patches = [
                RectPatch((r.x, r.y), r.width, r.height)
                for r in regions.values()
            ]
            ax.add_collection(
                PatchCollection(patches, facecolor='none', edgecolor='tab:blue', linewidth=0.4, alpha=0.6)
            )

        positions, _, masses = particle_arrays(particles)
        if len(masses):
            if self.size_by_mass and np.max(masses) > 0:
                sizes = 4 + 40 * masses / np.max(masses)
            else:
                sizes = 6
            ax.scatter(positions[:, 0], positions[:, 1], s=sizes, c='black')

        if self.interactive:
            self.fig.canvas.draw_idle()
            plt.pause(0.001)

    def capture_frame(self) -> np.ndarray:
        """Capture current frame as an (H, W, 3) uint8 array."""
        if self.fig is None:
            raise RuntimeError("Renderer not initialized. Call render() first.")
        self.fig.canvas.draw()
        buf = np.asarray(self.fig.canvas.buffer_rgba())
        return buf[:, :, :3].copy()

    def save(self, output_path: str):
        """Save the current frame to an image file."""
        if self.fig is None:
            raise RuntimeError("Renderer not initialized. Call render() first.")
        self.fig.savefig(output_path, dpi=self.dpi)

    def close(self):
        if self.fig is not None:
            plt.close(self.fig)
        self.fig = None
        self.ax = None
        self.initialized = False
