"""Vase example: a surface of revolution built from curves only.

Demonstrates: quadratic_bezier, concatenate1, circle, intersect_y2, mirror_x,
              mirror_y, cquad, concatenate_x2, sample_surface, save_npy
Output:       examples/vase_example.npy  +  examples/vase_example.png

Build sequence
--------------
1. Profile: two Bezier arcs joined at the waist (radius as a function of height)
2. Rim curves: the bottom and top circles of the vase
3. Side edges: the profile placed in the XZ plane
4. Half shell: cquad from the four boundary curves
5. Whole shell: the half shell and its Y-reflection joined along the angle axis
"""
import os, sys
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from homotopy import (
    Curve, Surface, circle, concatenate1, concatenate_x2, cquad, intersect_y2,
    mirror_x, mirror_y, quadratic_bezier, sample_surface, save_npy,
)

_RES = (48, 32)
_DIR = os.path.dirname(__file__)


def _render_png(pts, out_path, title="", color=(0.4, 0.7, 1.0)):
    try:
        import matplotlib.pyplot as plt
    except ImportError:
        print("  matplotlib not available — skipping PNG")
        return

    fig = plt.figure(figsize=(5, 5), facecolor="#111")
    ax  = fig.add_subplot(111, projection="3d")
    ax.set_facecolor("#111"); ax.set_axis_off(); ax.set_box_aspect([1, 1, 1.5])
    ax.plot_surface(pts[..., 0], pts[..., 1], pts[..., 2], color=color, linewidth=0)
    ax.set_title(title, color="white", fontsize=9)
    plt.savefig(out_path, dpi=150, bbox_inches="tight", facecolor="#111")
    plt.close()


def build_vase(height: float = 2.0) -> Surface:
    # 1. profile in (radius, 0, z)
    lower = quadratic_bezier([0.5, 0, 0], [1.2, 0, 0.5 * height / 2], [0.4, 0, height / 2])
    upper = quadratic_bezier([0.4, 0, height / 2], [0.2, 0, 0.8 * height], [0.6, 0, height])
    profile = concatenate1(0.5, lower, upper)

    # 2. rims: half circles (angle 0 -> 0.5) at full radius fraction
    bottom = intersect_y2(1.0, circle([0, 0, 0], 0.5))
    top = intersect_y2(1.0, circle([0, 0, height], 0.6))
    half = lambda c: Curve(lambda t: c(0.5 * t))

    # 3. side edges: profile at angle 0 and its reflection at angle pi
    left = profile
    right = mirror_x(0.0, profile)

    # 4. half shell, 5. whole shell
    shell = cquad(0.2, left, right, half(bottom), half(top))
    return concatenate_x2(0.5, shell, mirror_y(0.0, shell))


if __name__ == "__main__":
    vase = build_vase()
    pts = sample_surface(vase, _RES)
    print(f"vase: {pts.shape[0] * pts.shape[1]} points, "
          f"z in [{pts[..., 2].min():.2f}, {pts[..., 2].max():.2f}]")
    save_npy(os.path.join(_DIR, "vase_example.npy"), pts)
    _render_png(pts, os.path.join(_DIR, "vase_example.png"), title="vase")
