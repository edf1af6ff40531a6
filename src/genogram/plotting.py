"""Preview rendering of a laid-out genogram."""

from pathlib import Path

import matplotlib.pyplot as plt
from matplotlib.patches import Circle, Rectangle

from genogram.config import LayoutConfig
from genogram.connectors import compute_connectors, symbol_for
from genogram.layout import LayoutResult
from genogram.models import GenogramData

DPI = 100


def plot_layout(
    data: GenogramData,
    result: LayoutResult,
    config: LayoutConfig | None = None,
    output_path: Path | None = None,
):
    """
    Draw the genogram exactly where the layout put everyone.

    Men are squares and women circles, each labelled with their name below.
    The canvas covers the layout's bounding box, with y growing downwards.

    Args:
        data: The dataset that was laid out
        result: Output of layout(data, config)
        config: The geometry used for the layout
        output_path: Path to save the image (png, svg or pdf). If None, displays interactively.
    """
    if config is None:
        config = LayoutConfig()
    positions, bounds = result

    fig, ax = plt.subplots(figsize=(bounds.width / DPI, bounds.height / DPI), dpi=DPI)
    ax.set_xlim(0, bounds.width)
    ax.set_ylim(bounds.height, 0)
    ax.set_aspect("equal")
    ax.axis("off")

    for c in compute_connectors(data, positions, config):
        ax.plot([c.start.x, c.end.x], [c.start.y, c.end.y], color="#1f2937", linewidth=2, zorder=1)

    half_w = config.person_width / 2
    half_h = config.person_height / 2
    for person in data.people:
        pos = positions.get(person.id)
        if pos is None:
            continue
        if symbol_for(person) == "square":
            shape = Rectangle(
                (pos.x - half_w, pos.y - half_h),
                config.person_width,
                config.person_height,
                facecolor="white",
                edgecolor="#1f2937",
                linewidth=2,
                zorder=2,
            )
        else:
            shape = Circle(
                (pos.x, pos.y), half_w, facecolor="white", edgecolor="#1f2937", linewidth=2, zorder=2
            )
        ax.add_patch(shape)
        ax.text(pos.x, pos.y + half_h + 15, person.name, ha="center", va="center", fontsize=9)

    if output_path:
        ext = output_path.suffix.lower().lstrip(".")
        if ext not in ("png", "svg", "pdf"):
            ext = "png"
        fig.savefig(output_path, format=ext)
        plt.close(fig)
        print(f"Genogram saved to {output_path}")
    else:
        plt.show()
