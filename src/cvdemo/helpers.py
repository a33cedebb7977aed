from __future__ import annotations
import argparse
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional, Sequence, Tuple

import cv2
import numpy as np
import os

from .fetch import DEFAULT_USER_AGENT

logger = logging.getLogger(__name__)

DISPLAY_ENV_VARS: Tuple[str, ...] = ("CI", "GITHUB_ACTIONS", "DISABLE_DISPLAY")
URL_PREFIXES: Tuple[str, ...] = ("http://", "https://")


# Config dataclasses (lightweight & reusable)

@dataclass(frozen=True)
class RunConfig:
    image_input: Optional[str] = None   # path or URL; None => synthetic
    disable_display: bool = False


@dataclass
class ProcessConfig:
    canny_low: int = 50
    canny_high: int = 150
    # HSV bounds (OpenCV hue is 0..179)
    blue_lower: Tuple[int, int, int] = (100, 50, 50)
    blue_upper: Tuple[int, int, int] = (130, 255, 255)
    green_lower: Tuple[int, int, int] = (40, 50, 50)
    green_upper: Tuple[int, int, int] = (80, 255, 255)
    contour_color: Tuple[int, int, int] = (0, 255, 255)  # BGR
    contour_thickness: int = 2


@dataclass
class OutputConfig:
    out_dir: str = "."
    downloaded_name: str = "downloaded_image.jpg"
    synthetic_name: str = "synthetic_input.jpg"
    result_name: str = "opencv_demo_result.jpg"

    def path(self, name: str) -> str:
        return os.path.join(self.out_dir, name)


@dataclass
class PipelineConfig:
    process: ProcessConfig = field(default_factory=ProcessConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    user_agent: str = DEFAULT_USER_AGENT


# Input resolution

DISPLAY_FLAGS: Tuple[str, ...] = ("--no-display", "--ci")


def build_argparser() -> argparse.ArgumentParser:
    # no -h/--help: every non "--" token is an image source
    p = argparse.ArgumentParser(
        description="OpenCV demo: edges, contours and color filtering on one image",
        usage="%(prog)s [SOURCE] [--no-display] [--ci]",
        add_help=False,
        allow_abbrev=False,
    )
    p.add_argument("--no-display", dest="no_display", action="store_true",
                   help="Skip the interactive window")
    p.add_argument("--ci", action="store_true", help="Same as --no-display")
    return p


def resolve_run_config(
    argv: Sequence[str],
    environ: Optional[Mapping[str, str]] = None,
) -> RunConfig:
    """
    Build the run configuration from argv and the environment.
    Non-flag arguments are image inputs (last one wins). Only exact
    --no-display / --ci tokens are flags; any other --token is ignored.
    """
    environ = os.environ if environ is None else environ
    argv = list(argv)

    flags = [a for a in argv if a in DISPLAY_FLAGS]
    args = build_argparser().parse_args(flags)

    image_input = None
    for arg in argv:
        if not arg.startswith("--"):
            image_input = arg

    disable = args.no_display or args.ci
    if any(name in environ for name in DISPLAY_ENV_VARS):
        disable = True
    return RunConfig(image_input=image_input or None, disable_display=disable)


def classify_source(source: str) -> str:
    """Return 'url' for http(s) sources, 'file' for everything else."""
    return "url" if source.startswith(URL_PREFIXES) else "file"


# I/O & filesystem helpers

def ensure_dir(path: str | os.PathLike) -> None:
    Path(path).mkdir(parents=True, exist_ok=True)


def is_empty(img: Optional[np.ndarray]) -> bool:
    return img is None or img.size == 0


def load_image_bgr(path: str | os.PathLike) -> np.ndarray:
    """Load an image as BGR uint8 (OpenCV default). Raises on failure."""
    img = cv2.imread(str(path), cv2.IMREAD_COLOR)
    if is_empty(img):
        raise FileNotFoundError(f"Could not read image: {path}")
    return img


def save_image(path: str | os.PathLike, img: np.ndarray) -> Optional[str]:
    """Write `img`; a failed write is logged and returns None instead of raising."""
    try:
        ok = cv2.imwrite(str(path), img)
    except cv2.error as e:
        logger.warning("Could not write image %s: %s", path, e)
        return None
    if not ok:
        logger.warning("Could not write image: %s", path)
        return None
    return str(path)
