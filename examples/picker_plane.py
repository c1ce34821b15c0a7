"""Render the lightness × chroma picker plane for a few hues as PNG files.

Run directly with:
    python examples/picker_plane.py
"""
from PIL import Image

from chromapick import sample_plane


def save_planes(width: int = 280, height: int = 160) -> None:
    for hue in (0, 120, 240):
        oklch_plane = sample_plane(hue, width, height)
        Image.fromarray(oklch_plane, 'RGB').save(f"plane_oklch_{hue}.png")

        lch_plane = sample_plane(hue, width, height, is_lch=True)
        Image.fromarray(lch_plane, 'RGB').save(f"plane_lch_{hue}.png")
        print(f"Saved hue {hue} planes ({width}x{height})")


if __name__ == "__main__":
    save_planes()
