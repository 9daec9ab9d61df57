"""CV generation pipeline: two model stages, user overrides, HTML assembly, PDF rendering."""

from cv_genie.cv_pipeline.pipeline import build_tailored_record, run_cv_pipeline

__all__ = ["run_cv_pipeline", "build_tailored_record"]
