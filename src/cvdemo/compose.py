from __future__ import annotations
from typing import Optional, Sequence, Tuple

import cv2
import numpy as np

from .helpers import save_image
from .process import ProcessResult


class Compositor:
    """2x2 labeled grid: [original | edges] over [contours | color filter]."""

    def __init__(
        self,
        labels: Sequence[str] = ("Original", "Edges", "Contours", "Color Filter"),
        font: int = cv2.FONT_HERSHEY_SIMPLEX,
        font_scale: float = 0.8,
        color: Tuple[int, int, int] = (255, 255, 255),
        thickness: int = 2,
    ) -> None:
        if len(labels) != 4:
            raise ValueError("need exactly 4 panel labels")
        self.labels = tuple(labels)
        self.font = font
        self.font_scale = font_scale
        self.color = color
        self.thickness = thickness

    @staticmethod
    def _as_bgr(img: np.ndarray) -> np.ndarray:
        if img.ndim == 2:
            return cv2.cvtColor(img, cv2.COLOR_GRAY2BGR)
        return img

    def label_positions(self, w: int, h: int) -> list[Tuple[int, int]]:
        return [(10, 30), (w + 10, 30), (10, h + 60), (w + 10, h + 60)]

    def compose(self, image: np.ndarray, result: ProcessResult) -> np.ndarray:
        panels = [
            image,
            self._as_bgr(result.edges),
            result.contour_image,
            result.color_result,
        ]
        shapes = {p.shape for p in panels}
        if len(shapes) != 1:
            raise ValueError(f"panel shapes differ: {sorted(shapes)}")

        top = cv2.hconcat([panels[0], panels[1]])
        bottom = cv2.hconcat([panels[2], panels[3]])
        grid = cv2.vconcat([top, bottom])

        h, w = image.shape[:2]
        for text, org in zip(self.labels, self.label_positions(w, h)):
            cv2.putText(grid, text, org, self.font, self.font_scale, self.color, self.thickness)
        return grid

    @staticmethod
    def save(grid: np.ndarray, path: str = "opencv_demo_result.jpg") -> Optional[str]:
        return save_image(path, grid)
