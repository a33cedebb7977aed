from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np

from .compose import Compositor
from .fetch import fetch_image
from .helpers import (
    PipelineConfig, RunConfig, classify_source, ensure_dir, is_empty, load_image_bgr, save_image,
)
from .process import DemoProcessor, ProcessResult
from .synth import synthesize
from .viz import DISABLED, DisplayResult, Presenter

logger = logging.getLogger(__name__)


@dataclass
class PipelineOutcome:
    source: str                 # 'URL: ...' | 'File: ...' | 'Synthetic image'
    image: np.ndarray
    result: ProcessResult
    composite: np.ndarray
    written: List[str]
    display: DisplayResult


class DemoPipeline:
    """Resolve -> (fetch | load | synthesize) -> process -> compose -> present."""

    def __init__(self, config: Optional[PipelineConfig] = None) -> None:
        self.config = config or PipelineConfig()
        self.processor = DemoProcessor(self.config.process)
        self.compositor = Compositor()
        self.presenter = Presenter()

    def resolve_image(self, run_cfg: RunConfig, written: List[str]) -> Tuple[np.ndarray, str]:
        out = self.config.output
        image = None
        source = ""

        src = run_cfg.image_input
        if src:
            if classify_source(src) == "url":
                print(f"Downloading image from URL: {src}")
                image = fetch_image(src, user_agent=self.config.user_agent)
                source = f"URL: {src}"
                if not is_empty(image):
                    saved = save_image(out.path(out.downloaded_name), image)
                    if saved:
                        written.append(saved)
                    print(f"Downloaded image saved as '{out.downloaded_name}'")
            else:
                source = f"File: {src}"
                try:
                    image = load_image_bgr(src)
                except FileNotFoundError as e:
                    logger.debug("%s", e)
                    image = None

        if is_empty(image):
            print("No valid image found, creating synthetic test image...")
            path = out.path(out.synthetic_name)
            image = synthesize(save_path=path)
            if os.path.isfile(path):
                written.append(path)
            source = "Synthetic image"

        return image, source

    def run(self, run_cfg: RunConfig) -> PipelineOutcome:
        out = self.config.output
        ensure_dir(out.out_dir)
        written: List[str] = []

        image, source = self.resolve_image(run_cfg, written)
        h, w = image.shape[:2]
        print(f"Processing: {source}")
        print(f"Image size: {w}x{h}")

        result = self.processor.run(image)
        logger.info("found %d contours", result.n_contours)

        composite = self.compositor.compose(image, result)
        saved = self.compositor.save(composite, out.path(out.result_name))
        if saved:
            written.append(saved)

        print("\nOpenCV processing completed!")
        print(f"Found {result.n_contours} contours in the image")
        print("\nResults saved:")
        print(f"  - {out.result_name} (4-panel comparison)")
        for p in written:
            logger.info("wrote %s", p)

        display = self.presenter.show(composite, disabled=run_cfg.disable_display)
        if display.status == DISABLED:
            print(f"\n{display.message}")
            print("All images saved successfully!")
        elif not display.ok:
            logger.info("%s", display.message)
            print("\nDisplay not available, but all images saved successfully!")

        return PipelineOutcome(
            source=source,
            image=image,
            result=result,
            composite=composite,
            written=written,
            display=display,
        )
