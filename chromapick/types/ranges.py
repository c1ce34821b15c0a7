# No dependencies
"""Channel ranges and fixed sampling constants shared across chromapick."""

OKLCH_MAX_LIGHTNESS = 1.0
OKLCH_MAX_CHROMA = 0.4
LCH_MAX_LIGHTNESS = 100.0
LCH_MAX_CHROMA = 150.0
HUE_360 = 360.0
ALPHA_MAX = 100.0
RGB_MAX = 255

# LCH.l = OKLCH.l * LIGHTNESS_SCALE, LCH.c = OKLCH.c * CHROMA_SCALE
LIGHTNESS_SCALE = LCH_MAX_LIGHTNESS / OKLCH_MAX_LIGHTNESS
CHROMA_SCALE = LCH_MAX_CHROMA / OKLCH_MAX_CHROMA

# Below this chroma a color is rendered as pure gray.
ACHROMATIC_CHROMA = 0.001

LIGHTNESS_SAMPLES = 11
CHROMA_SAMPLES = 11
HUE_SAMPLES = 13

max_lightness = {
    "oklch": OKLCH_MAX_LIGHTNESS,
    "lch": LCH_MAX_LIGHTNESS,
}

max_chroma = {
    "oklch": OKLCH_MAX_CHROMA,
    "lch": LCH_MAX_CHROMA,
}
