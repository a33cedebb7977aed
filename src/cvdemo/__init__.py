from .helpers import (
    RunConfig, ProcessConfig, OutputConfig, PipelineConfig,
    resolve_run_config, classify_source, ensure_dir, is_empty, load_image_bgr,
)
from .fetch import download_bytes, decode_image, fetch_image
from .synth import synthesize
from .process import DemoProcessor, ProcessResult
from .compose import Compositor
from .viz import Presenter, DisplayResult
from .pipeline import DemoPipeline, PipelineOutcome

__all__ = [
    "RunConfig", "ProcessConfig", "OutputConfig", "PipelineConfig",
    "resolve_run_config", "classify_source", "ensure_dir", "is_empty", "load_image_bgr",
    "download_bytes", "decode_image", "fetch_image",
    "synthesize",
    "DemoProcessor", "ProcessResult",
    "Compositor",
    "Presenter", "DisplayResult",
    "DemoPipeline", "PipelineOutcome",
]
