import io
import logging
import mimetypes
import zipfile
from pathlib import Path
from typing import Callable, List, Optional, Sequence, Union
from .config import PPTX_MIMETYPE
from .errors import ReadError

logger = logging.getLogger(__name__)

Source = Union[bytes, Path]
Detector = Callable[[Source, str], Optional[str]]

CONTENT_TYPES_PART = '[Content_Types].xml'

# Main part content type -> package mimetype
MAIN_PART_MIMETYPES = {
    'application/vnd.openxmlformats-officedocument.presentationml.presentation.main+xml': PPTX_MIMETYPE,
    'application/vnd.ms-powerpoint.presentation.macroEnabled.main+xml':
        'application/vnd.ms-powerpoint.presentation.macroEnabled.12',
    'application/vnd.openxmlformats-officedocument.presentationml.slideshow.main+xml':
        'application/vnd.openxmlformats-officedocument.presentationml.slideshow',
    'application/vnd.ms-powerpoint.slideshow.macroEnabled.main+xml':
        'application/vnd.ms-powerpoint.slideshow.macroEnabled.12',
    'application/vnd.openxmlformats-officedocument.presentationml.template.main+xml':
        'application/vnd.openxmlformats-officedocument.presentationml.template',
    'application/vnd.ms-powerpoint.template.macroEnabled.main+xml':
        'application/vnd.ms-powerpoint.template.macroEnabled.12',
}

EXTENSION_MIMETYPES = {
    '.pptx': PPTX_MIMETYPE,
    '.pptm': 'application/vnd.ms-powerpoint.presentation.macroEnabled.12',
    '.ppsx': 'application/vnd.openxmlformats-officedocument.presentationml.slideshow',
    '.ppsm': 'application/vnd.ms-powerpoint.slideshow.macroEnabled.12',
    '.potx': 'application/vnd.openxmlformats-officedocument.presentationml.template',
    '.potm': 'application/vnd.ms-powerpoint.template.macroEnabled.12',
    '.ppt': 'application/vnd.ms-powerpoint',
}


def detect_from_content(source, filename):
    """
    Sniff the package itself: a ZIP whose [Content_Types].xml declares a
    PresentationML main part. Returns None for anything else.
    """
    fp = io.BytesIO(source) if isinstance(source, (bytes, bytearray)) else source
    if not zipfile.is_zipfile(fp):
        return None

    if isinstance(fp, io.BytesIO):
        fp.seek(0)
    with zipfile.ZipFile(fp) as zf:
        if CONTENT_TYPES_PART not in zf.namelist():
            return None
        types_xml = zf.read(CONTENT_TYPES_PART).decode('utf-8', errors='replace')

    for content_type, mimetype in MAIN_PART_MIMETYPES.items():
        if content_type in types_xml:
            return mimetype
    return None


def detect_from_filename(source, filename):
    """Look the extension up, falling back to the mimetypes module."""
    ext = Path(filename or '').suffix.lower()
    if ext in EXTENSION_MIMETYPES:
        return EXTENSION_MIMETYPES[ext]
    mime_type, _ = mimetypes.guess_type(filename or '')
    return mime_type


DEFAULT_DETECTORS: List[Detector] = [detect_from_content, detect_from_filename]


def resolve_mimetype(
    source: Source,
    filename: str,
    declared: Optional[str] = None,
    detectors: Optional[Sequence[Detector]] = None
) -> str:
    """
    Find the mimetype to stamp on every slide file.

    The declared type wins when it isn't blank; otherwise each detector is
    tried in order and the first answer is used. A detector that blows up
    counts as a miss.
    """
    if declared and declared.strip():
        return declared.strip()

    if detectors is None:
        detectors = DEFAULT_DETECTORS

    last_error = None
    for detect in detectors:
        name = getattr(detect, '__name__', repr(detect))
        try:
            mimetype = detect(source, filename)
        except Exception as e:
            logger.warning(f'Mimetype detector {name} failed: {e}')
            last_error = e
            continue
        if mimetype:
            logger.debug(f'Mimetype {mimetype} from {name}')
            return mimetype

    raise ReadError(f'Cannot get a mimetype from the content or the filename of {filename!r}') from last_error
