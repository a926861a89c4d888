from __future__ import annotations

import math


_HASH_MULTIPLIER = 31
_STEP_SCALE = 1.37
_SINE_AMPLITUDE = 43758.5453


def _hash32(seed: str) -> int:
    value = 0
    for char in seed:
        value = (value * _HASH_MULTIPLIER + ord(char)) & 0xFFFFFFFF
    # signed 32-bit view
    if value >= 0x80000000:
        value -= 0x100000000
    return value


def noise(seed: str, step: int) -> float:
    """Valor pseudo-aleatorio em [0, 1), deterministico para (seed, step)."""
    x = math.sin(_hash32(seed) + step * _STEP_SCALE) * _SINE_AMPLITUDE
    fraction = x - math.floor(x)
    return fraction if fraction < 1.0 else 0.0
