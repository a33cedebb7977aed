from __future__ import annotations
import logging
from typing import Optional

import cv2
import numpy as np

from .helpers import save_image

logger = logging.getLogger(__name__)

CANVAS_W, CANVAS_H = 600, 400


def synthesize(save_path: Optional[str] = "synthetic_input.jpg") -> np.ndarray:
    """
    Fixed 600x400 BGR test card:
      green filled rectangle, blue filled circle, red filled ellipse (45 deg).
    Written to `save_path` unless it is None.
    """
    img = np.zeros((CANVAS_H, CANVAS_W, 3), dtype=np.uint8)
    cv2.rectangle(img, (50, 50), (200, 150), (0, 255, 0), cv2.FILLED)
    cv2.circle(img, (400, 200), 80, (255, 0, 0), cv2.FILLED)
    cv2.ellipse(img, (300, 300), (100, 50), 45, 0, 360, (0, 0, 255), cv2.FILLED)

    if save_path is not None:
        if save_image(save_path, img):
            logger.debug("wrote synthetic canvas to %s", save_path)
    return img
