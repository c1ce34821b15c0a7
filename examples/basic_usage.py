"""Basic chromapick usage examples.

Run directly with:
    python examples/basic_usage.py
"""
from chromapick import (
    OKLCH,
    ColorOKLCH,
    color_from_hex,
    convert,
    format_lch,
    format_oklch,
    generate_hue_gradient,
    generate_lightness_gradient,
    oklch_to_rgb,
    rgb_to_hex,
    to_css_linear_gradient,
)


def demonstrate_colors() -> None:
    # Convert a picker value through every representation.
    accent = OKLCH(0.65, 0.25, 30.0)
    rgb = oklch_to_rgb(accent)
    print("OKLCH -> RGB:", rgb)
    print("RGB -> HEX:", rgb_to_hex(rgb))
    print("OKLCH -> LCH:", format_lch(convert(accent, "oklch", "lch")))

    # Color objects keep alpha through hex round-trips.
    translucent = ColorOKLCH(accent).with_alpha(50)
    print("Translucent hex:", translucent.to_hex())
    parsed = color_from_hex(translucent.to_hex())
    print("Parsed back:", format_oklch(parsed.value), "alpha", parsed.alpha)


def demonstrate_gradients() -> None:
    # Slider backgrounds for the current color.
    lightness = generate_lightness_gradient(0.25, 30.0)
    print("Lightness slider:", to_css_linear_gradient(lightness))

    hue = generate_hue_gradient(0.65, 0.25)
    print("Hue slider stops:", [stop.color for stop in hue])


if __name__ == "__main__":
    demonstrate_colors()
    demonstrate_gradients()
