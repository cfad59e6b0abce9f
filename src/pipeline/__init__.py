"""End-to-end document pipeline."""

from src.pipeline.full_pipeline import DocumentPipeline, recognize_document

__all__ = ["DocumentPipeline", "recognize_document"]
