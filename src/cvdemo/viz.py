from __future__ import annotations
from dataclasses import dataclass

import cv2
import numpy as np

SHOWN = "shown"
DISABLED = "disabled"
UNAVAILABLE = "unavailable"


@dataclass
class DisplayResult:
    status: str     # 'shown' | 'disabled' | 'unavailable'
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.status != UNAVAILABLE


class Presenter:
    """Optional OpenCV window. Never raises for a missing display; reports via DisplayResult."""

    def __init__(self, window_name: str = "OpenCV Demo - Multiple Techniques") -> None:
        self.window_name = window_name

    def show(self, image: np.ndarray, disabled: bool = False) -> DisplayResult:
        if disabled:
            return DisplayResult(DISABLED, "Display disabled (running in CI or --no-display flag used)")

        try:
            cv2.imshow(self.window_name, image)
            print("\nPress any key to close...")
            cv2.waitKey(0)
        except cv2.error as e:
            return DisplayResult(UNAVAILABLE, f"Display not available: {e}")
        finally:
            self._close()
        return DisplayResult(SHOWN)

    @staticmethod
    def _close() -> None:
        try:
            cv2.destroyAllWindows()
        except cv2.error:
            # headless builds have nothing to tear down
            pass
