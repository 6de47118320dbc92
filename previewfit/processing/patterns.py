"""Synthetic test card for checking preview orientation and distortion."""

import numpy as np
import cv2

from ..core.geometry import Size

GRID_STEP = 80


def generate_test_card(size: Size, frame_number: int = 0) -> np.ndarray:
    """
    Generate a BGR test card at the given buffer size.

    The card carries a grid, a centered circle (distortion shows up as an
    ellipse), an arrow pointing to the top edge and a sweep bar driven by
    ``frame_number``.
    """
    width, height = size.width, size.height
    if size.is_empty:
        return np.zeros((height, width, 3), dtype=np.uint8)

    # Horizontal gradient background
    x = np.linspace(40, 120, width, dtype=np.uint8)
    frame = np.dstack([np.tile(x, (height, 1))] * 3).copy()

    for gx in range(0, width, GRID_STEP):
        cv2.line(frame, (gx, 0), (gx, height - 1), (90, 90, 90), 1)
    for gy in range(0, height, GRID_STEP):
        cv2.line(frame, (0, gy), (width - 1, gy), (90, 90, 90), 1)

    cx, cy = width // 2, height // 2
    radius = max(1, min(width, height) // 3)
    cv2.circle(frame, (cx, cy), radius, (0, 200, 255), 3)

    arrow_len = max(2, radius)
    cv2.arrowedLine(
        frame,
        (cx, cy),
        (cx, max(0, cy - arrow_len)),
        (0, 255, 0),
        4,
        tipLength=0.25,
    )
    cv2.putText(
        frame,
        "UP",
        (cx + 10, max(20, cy - arrow_len + 20)),
        cv2.FONT_HERSHEY_SIMPLEX,
        1.0,
        (0, 255, 0),
        2,
    )

    # Moving sweep bar
    bar_x = (frame_number * 4) % width
    frame[:, bar_x:min(width, bar_x + 6)] = (255, 255, 255)

    cv2.putText(
        frame,
        f"{width}x{height}",
        (10, 30),
        cv2.FONT_HERSHEY_SIMPLEX,
        0.8,
        (255, 255, 255),
        2,
    )
    return frame
