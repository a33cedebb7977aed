from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Tuple

import cv2
import numpy as np

from .helpers import ProcessConfig, is_empty


@dataclass
class ProcessResult:
    gray: np.ndarray            # uint8, 1 channel
    edges: np.ndarray           # uint8, 0/255
    contours: List[np.ndarray]
    hierarchy: Optional[np.ndarray]
    contour_image: np.ndarray   # BGR, contours drawn
    color_mask: np.ndarray      # uint8, 0/255
    color_result: np.ndarray    # BGR, only masked pixels kept

    @property
    def n_contours(self) -> int:
        return len(self.contours)


class DemoProcessor:
    """BGR in -> gray, Canny edges, external contours, HSV blue/green filter."""

    def __init__(self, config: Optional[ProcessConfig] = None) -> None:
        self.config = config or ProcessConfig()
        if self.config.canny_low > self.config.canny_high:
            raise ValueError("canny_low must be <= canny_high")

    @staticmethod
    def to_gray(img_bgr: np.ndarray) -> np.ndarray:
        return cv2.cvtColor(img_bgr, cv2.COLOR_BGR2GRAY)

    def detect_edges(self, gray: np.ndarray) -> np.ndarray:
        return cv2.Canny(gray, self.config.canny_low, self.config.canny_high)

    @staticmethod
    def find_contours(edges: np.ndarray) -> Tuple[List[np.ndarray], Optional[np.ndarray]]:
        # findContours may modify its input on older OpenCV builds
        contours, hierarchy = cv2.findContours(edges.copy(), cv2.RETR_EXTERNAL, cv2.CHAIN_APPROX_SIMPLE)
        return list(contours), hierarchy

    def draw_contours(self, img_bgr: np.ndarray, contours: List[np.ndarray]) -> np.ndarray:
        out = img_bgr.copy()
        if contours:
            cv2.drawContours(out, contours, -1, self.config.contour_color, self.config.contour_thickness)
        return out

    def color_mask(self, img_bgr: np.ndarray) -> np.ndarray:
        c = self.config
        hsv = cv2.cvtColor(img_bgr, cv2.COLOR_BGR2HSV)
        blue = cv2.inRange(hsv, np.array(c.blue_lower, np.uint8), np.array(c.blue_upper, np.uint8))
        green = cv2.inRange(hsv, np.array(c.green_lower, np.uint8), np.array(c.green_upper, np.uint8))
        return cv2.bitwise_or(blue, green)

    @staticmethod
    def color_filter(img_bgr: np.ndarray, mask_u8: np.ndarray) -> np.ndarray:
        # unmasked pixels stay black
        return cv2.bitwise_and(img_bgr, img_bgr, mask=mask_u8)

    def run(self, img_bgr: np.ndarray) -> ProcessResult:
        """gray -> edges -> contours -> overlay; HSV mask -> filtered copy."""
        if is_empty(img_bgr):
            raise ValueError("cannot process an empty image")

        gray = self.to_gray(img_bgr)
        edges = self.detect_edges(gray)
        contours, hierarchy = self.find_contours(edges)
        contour_image = self.draw_contours(img_bgr, contours)

        mask = self.color_mask(img_bgr)
        filtered = self.color_filter(img_bgr, mask)

        return ProcessResult(
            gray=gray,
            edges=edges,
            contours=contours,
            hierarchy=hierarchy,
            contour_image=contour_image,
            color_mask=mask,
            color_result=filtered,
        )
