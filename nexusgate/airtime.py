"""Time-on-air estimate for LoRa packets."""

from __future__ import annotations

import math

_PREAMBLE_SYMBOLS = 8 + 4.25


def calculate_airtime(
    payload_len: int,
    spreading_factor: int,
    bandwidth: int,
    coding_rate: int,
    checksum: bool,
) -> int:
    """Return the airtime of a packet in sixteenths of a millisecond.

    The value is truncated to an unsigned 16-bit integer.
    """
    symbol_duration = (1 << spreading_factor) / bandwidth
    preamble_duration = symbol_duration * _PREAMBLE_SYMBOLS

    low_rate_optimize = 1 if spreading_factor > 10 else 0
    numerator = 8 * payload_len - 4 * spreading_factor + 28 + 16 * int(checksum)
    denominator = 4.0 * (spreading_factor - 2 * low_rate_optimize)

    payload_symbols = 8 + max(math.ceil(numerator / denominator) * coding_rate, 0)
    payload_duration = payload_symbols * symbol_duration

    total = preamble_duration + payload_duration
    return int(total * 1000 * 16) & 0xFFFF