"""Render a selection of homotopy maps on one page.

Curves are drawn as polylines, surfaces as shaded quad meshes and volumes as
their six boundary faces, all sampled with the grid utilities.

Usage::

    python scripts/gallery.py                   # saves gallery.png
    python scripts/gallery.py --out my_file.png
    python scripts/gallery.py --res 16          # faster, coarser

Requirements: numpy, matplotlib
"""
from __future__ import annotations

import argparse
import os
import sys

# Ensure the repo root (parent of scripts/) is importable regardless of cwd
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import matplotlib.pyplot as plt
import numpy as np

import homotopy as hm


# ---------------------------------------------------------------------------
# Shape catalogue  (label, map)
# ---------------------------------------------------------------------------

def _make_shapes() -> list[tuple[str, hm.HomotopyMap]]:
    a, b, c, d = [0, 0, 0], [0.3, 1, 0.2], [0.7, 1, -0.2], [1, 0, 0]
    edge_ab = hm.quadratic_bezier([0, 0, 0], [-0.2, 0.5, 0.3], [0, 1, 0])
    edge_cd = hm.quadratic_bezier([1, 0, 0], [1.2, 0.5, 0.3], [1, 1, 0])
    edge_ac = hm.quadratic_bezier([0, 0, 0], [0.5, -0.2, 0.3], [1, 0, 0])
    edge_bd = hm.quadratic_bezier([0, 1, 0], [0.5, 1.2, 0.3], [1, 1, 0])
    patch = hm.cquad(0.5, edge_ab, edge_cd, edge_ac, edge_bd)

    return [
        # --- curves ---
        ("line", hm.line(a, d)),
        ("quadratic_bezier", hm.quadratic_bezier(a, b, d)),
        ("cubic_bezier", hm.cubic_bezier(a, b, c, d)),
        ("concatenate1", hm.concatenate1(0.5, hm.line(a, b), hm.line(c, d))),
        ("contour(circle)", hm.contour(hm.circle([0, 0, 0], 1.0))),
        # --- surfaces ---
        ("circle", hm.circle([0, 0, 0], 1.0)),
        ("cquad", patch),
        ("baked_mirror_x2", hm.baked_mirror_x2(1.0, patch)),
        ("extend1", hm.extend1(hm.line([0, 0, 0], [0, 0, 1]),
                               hm.quadratic_bezier(a, [0.5, 1, 0], d))),
        ("intersect_z3(sphere)", hm.intersect_z3(1.0, hm.sphere([0, 0, 0], 1.0))),
        # --- volumes ---
        ("sphere", hm.sphere([0, 0, 0], 1.0)),
        ("extend2", hm.extend2(hm.line([0, 0, 0], [0, 0, 1]), hm.circle([0, 0, 0], 0.5))),
        ("margin3(sphere)", hm.margin3(0.2, hm.sphere([0, 0, 0], 1.0))),
    ]


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

def _faces(vol: hm.Volume) -> list[hm.Surface]:
    return [
        hm.intersect_x3(0.0, vol), hm.intersect_x3(1.0, vol),
        hm.intersect_y3(0.0, vol), hm.intersect_y3(1.0, vol),
        hm.intersect_z3(0.0, vol), hm.intersect_z3(1.0, vol),
    ]


def _draw(ax, shape: hm.HomotopyMap, res: int, color: np.ndarray) -> None:
    if isinstance(shape, hm.Curve):
        pts = hm.sample_curve(shape, res * 4)
        ax.plot(pts[:, 0], pts[:, 1], pts[:, 2], color=color, linewidth=1.5)
        return
    surfaces = _faces(shape) if isinstance(shape, hm.Volume) else [shape]
    for s in surfaces:
        pts = hm.sample_surface(s, (res, res))
        ax.plot_surface(pts[..., 0], pts[..., 1], pts[..., 2], color=color,
                        linewidth=0, antialiased=True, shade=True, alpha=0.9)


def render_gallery(shapes, out_path: str, ncols: int = 5, res: int = 24) -> None:
    nrows = (len(shapes) + ncols - 1) // ncols
    fig = plt.figure(figsize=(ncols * 3.0, nrows * 3.0), facecolor="#111111")

    _COLOR     = np.array([1.0, 0.82, 0.2])   # warm gold
    _VIEW_ELEV = 25
    _VIEW_AZIM = 35

    for idx, (label, shape) in enumerate(shapes):
        ax = fig.add_subplot(nrows, ncols, idx + 1, projection="3d")
        ax.set_facecolor("#111111")
        ax.set_axis_off()
        ax.set_title(label, color="white", fontsize=7, pad=1)
        _draw(ax, shape, res, _COLOR)
        ax.set_box_aspect([1, 1, 1])
        ax.view_init(elev=_VIEW_ELEV, azim=_VIEW_AZIM)

    fig.suptitle("homotopy — map gallery", color="white", fontsize=13, y=1.002)
    plt.tight_layout(pad=0.3)
    fig.savefig(out_path, dpi=150, bbox_inches="tight", facecolor=fig.get_facecolor())
    plt.close(fig)
    print(f"Saved: {out_path}")


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Render a selection of homotopy maps to a single PNG gallery."
    )
    parser.add_argument("--out",  default="gallery.png", help="Output PNG path")
    parser.add_argument("--cols", type=int, default=5, help="Number of columns (default 5)")
    parser.add_argument("--res",  type=int, default=24,
                        help="Samples per surface axis (default 24)")
    args = parser.parse_args()

    render_gallery(_make_shapes(), args.out, ncols=args.cols, res=args.res)


if __name__ == "__main__":
    main()
