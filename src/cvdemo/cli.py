from __future__ import annotations
import logging
import os
import sys
from typing import Optional, Sequence

from .helpers import PipelineConfig, resolve_run_config
from .pipeline import DemoPipeline


def _setup_logging() -> None:
    level = os.environ.get("CVDEMO_LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    _setup_logging()
    run_cfg = resolve_run_config(sys.argv[1:] if argv is None else argv)

    pipeline = DemoPipeline(PipelineConfig())
    pipeline.run(run_cfg)
    return 0


if __name__ == "__main__":
    sys.exit(main())
