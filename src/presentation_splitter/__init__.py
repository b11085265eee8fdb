"""Presentation Splitter - Split a PowerPoint presentation into one file per slide."""

from .errors import PresentationSplitterError, ReadError, SlideExtractionError
from .slides import get_slide_masters
from .splitter import ExtractedSlide, merge_slides, split_presentation

__version__ = "1.0.0"
__all__ = [
    "split_presentation",
    "merge_slides",
    "get_slide_masters",
    "ExtractedSlide",
    "PresentationSplitterError",
    "ReadError",
    "SlideExtractionError",
]
