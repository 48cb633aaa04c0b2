"""Vectorised luminance and contrast over many colours at once.

Same formulas as wcagcontrast.core.color, applied with numpy to arrays whose
last axis holds (r, g, b) channel values in 0..255.

Example:
    rgb = to_array([Color(0, 0, 0), '#ffffff'])
    contrast_matrix(rgb)   # [[1., 21.], [21., 1.]]
"""

from collections.abc import Iterable
from typing import Any

import numpy as np

from wcagcontrast.core.color import FLARE, GAMMA, GAMMA_OFFSET, LINEAR_SCALE, LINEAR_THRESHOLD, WEIGHTS, Color


def to_array(colors: Iterable[Any]) -> np.ndarray:
    """Stack Colors, '#RRGGBB' strings or (r, g, b) triples into an (N, 3) uint8 array."""
    rows = []
    for c in colors:
        if isinstance(c, str):
            c = Color.from_hex(c)
        elif not isinstance(c, Color):
            c = Color.from_rgb_tuple(tuple(c))
        rows.append(c.rgb())
    return np.array(rows, dtype=np.uint8).reshape(-1, 3)


def _as_channels(rgb: Any) -> np.ndarray:
    arr = np.asarray(rgb)
    if arr.ndim == 0 or arr.shape[-1] != 3:
        raise ValueError(f'expected last axis of size 3, got shape {arr.shape}')
    if arr.dtype.kind not in 'uif':
        raise ValueError(f'expected numeric channel values, got dtype {arr.dtype}')
    if arr.dtype.kind == 'f' and not (np.isfinite(arr).all() and (arr == np.round(arr)).all()):
        raise ValueError('channel values must be whole numbers')
    if arr.size and (arr.min() < 0 or arr.max() > 255):
        raise ValueError('channel values must be within 0..255')
    return arr.astype(np.float64)


def _linearise(c: np.ndarray) -> np.ndarray:
    c = c / 255.0
    return np.where(
        c <= LINEAR_THRESHOLD,
        c / LINEAR_SCALE,
        ((c + GAMMA_OFFSET) / (1 + GAMMA_OFFSET)) ** GAMMA,
    )


def relative_luminance(rgb: Any) -> np.ndarray:
    """Relative luminance for each colour. Shape (..., 3) -> (...)."""
    lin = _linearise(_as_channels(rgb))
    wr, wg, wb = WEIGHTS
    return wr * lin[..., 0] + wg * lin[..., 1] + wb * lin[..., 2]


def contrast_ratio(a: Any, b: Any) -> np.ndarray:
    """Element-wise contrast ratio between two broadcastable (..., 3) arrays."""
    la = relative_luminance(a)
    lb = relative_luminance(b)
    return (np.maximum(la, lb) + FLARE) / (np.minimum(la, lb) + FLARE)


def contrast_matrix(colors: Any) -> np.ndarray:
    """Pairwise contrast ratios. (N, 3) -> symmetric (N, N) with a unit diagonal."""
    arr = _as_channels(colors).reshape(-1, 3)
    return contrast_ratio(arr[:, np.newaxis, :], arr[np.newaxis, :, :])
