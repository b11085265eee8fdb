import os
from .config import FILENAME_SEPARATOR, OUTPUT_EXTENSION


def filename_base(filename):
    """
    Turn a filename hint into the prefix shared by every slide file.
    Drops any directory part and the last extension, then makes sure the
    result ends with the separator: "Deck.pptx" and "Deck" both give "Deck-".
    """
    name = (filename or '').replace('\\', '/').rsplit('/', 1)[-1]
    base, _ = os.path.splitext(name)
    if not base.endswith(FILENAME_SEPARATOR):
        base += FILENAME_SEPARATOR
    return base


def slide_filename(base, slide_index):
    """Filename for a 0-based slide index, numbered from 1."""
    return f'{base}{slide_index + 1}{OUTPUT_EXTENSION}'
