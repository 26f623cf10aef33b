# Ordered from sparse/light to dense/heavy
GLYPH_RAMP = '"`^\\",:;Il!i~+_-?][}{1)(|\\/tfjrxnuvczXYUJCLQ0OZmwqpdbkhao*#MW&8%B@$'

# Reference maximum for an 8-bit brightness value
MAX_BRIGHTNESS = 255
