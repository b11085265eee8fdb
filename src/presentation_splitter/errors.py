class PresentationSplitterError(Exception):
    """Base class for everything the splitter raises on purpose."""


class ReadError(PresentationSplitterError, ValueError):
    """
    The source can't be read as a presentation package, or no mimetype
    could be found for it. Raised before any slide file is written.
    """


class SlideExtractionError(PresentationSplitterError, OSError):
    """
    Copying, trimming or saving one slide's file failed.
    Files already written for earlier slides are left where they are.
    """

    def __init__(self, slide_index, path, message=None):
        self.slide_index = slide_index
        self.path = path
        if message is None:
            message = f'Could not extract slide {slide_index + 1} to {path}'
        super().__init__(message)
