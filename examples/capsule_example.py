"""Capsule example: a solid built from a swept disc and two hemispheres.

Demonstrates: circle, line, sphere, extend2, offset, mirror_z, concatenate_y,
              intersect_x3, intersect_y2, sample_volume, sample_curve, save_npy
Output:       examples/capsule_example.npy  +  examples/capsule_example.png

Build sequence
--------------
1. Body: a disc swept along a vertical line (extend2)
2. Cap: the upper half of a sphere, lifted to the top of the body
3. Ends: the cap joined with its reflection across the mid plane
4. Rim: the outer edge of the body's top face, sampled as a polyline
"""
import os, sys
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from homotopy import (
    Volume, circle, extend2, intersect_x3, intersect_y2, line, sample_curve,
    sample_volume, save_npy, sphere,
)

_RES = (24, 16, 12)
_DIR = os.path.dirname(__file__)


def _render_png(faces, rim, out_path, title="", color=(0.9, 0.5, 0.3)):
    try:
        import matplotlib.pyplot as plt
    except ImportError:
        print("  matplotlib not available — skipping PNG")
        return

    fig = plt.figure(figsize=(5, 5), facecolor="#111")
    ax  = fig.add_subplot(111, projection="3d")
    ax.set_facecolor("#111"); ax.set_axis_off(); ax.set_box_aspect([1, 1, 2])
    for pts in faces:
        ax.plot_wireframe(pts[..., 0], pts[..., 1], pts[..., 2], color=color, linewidth=0.4)
    ax.plot(rim[:, 0], rim[:, 1], rim[:, 2], color="white", linewidth=1.2)
    ax.set_title(title, color="white", fontsize=9)
    plt.savefig(out_path, dpi=150, bbox_inches="tight", facecolor="#111")
    plt.close()


def build_body(radius: float = 0.5, height: float = 2.0) -> Volume:
    # 1. disc in the XY plane swept from z = -h/2 to z = h/2
    axis = line([0, 0, -height / 2], [0, 0, height / 2])
    return extend2(axis, circle([0, 0, 0], radius))


def build_ends(radius: float = 0.5, height: float = 2.0) -> Volume:
    # 2. sphere height runs along t[1]; keep the upper half and lift it
    ball = sphere([0, 0, 0], radius)
    upper = Volume(lambda t: ball(t * [1.0, 0.5, 1.0] + [0.0, 0.5, 0.0]))
    cap = upper.offset([0, 0, height / 2])
    # 3. lower cap on the second half of t[1]
    return cap.concatenate_y(0.5, cap.mirror_z(0.0))


if __name__ == "__main__":
    body = build_body()
    ends = build_ends()
    pts = sample_volume(body, _RES)
    print(f"body: {pts.shape[0] * pts.shape[1] * pts.shape[2]} points, "
          f"z in [{pts[..., 2].min():.2f}, {pts[..., 2].max():.2f}]")
    save_npy(os.path.join(_DIR, "capsule_example.npy"), pts)

    # 4. top face is t[0] == 1; full radius fraction on it is the rim circle
    rim = sample_curve(intersect_y2(1.0, intersect_x3(1.0, body)), 200)
    # outer shells sit at full radius fraction, t[2] == 1
    faces = [pts[-1], sample_volume(ends, _RES)[-1]]
    _render_png(faces, rim, os.path.join(_DIR, "capsule_example.png"), title="capsule")
