import asyncio
import concurrent.futures
import logging
import os
import shutil
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence
from . import config
from .errors import ReadError, SlideExtractionError
from .mimetype import Detector, resolve_mimetype
from .naming import filename_base, slide_filename
from .slides import count_slides, keep_only_slide, open_presentation, save_presentation

logging.basicConfig(level=config.LOG_LEVEL, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExtractedSlide:
    """One single-slide presentation written by split_presentation."""
    slide_index: int
    filename: str
    path: Path
    mimetype: str

    @property
    def slide_number(self):
        return self.slide_index + 1

    @property
    def content(self) -> bytes:
        return self.path.read_bytes()


def split_presentation(
    source,
    filename: Optional[str] = None,
    mimetype: Optional[str] = None,
    output_dir=None,
    max_workers: Optional[int] = None,
    detectors: Optional[Sequence[Detector]] = None
) -> List[ExtractedSlide]:
    """
    Split a presentation into one presentation file per slide.

    Each slide gets a full copy of the original file with every other slide
    deleted from it, so one copy and one save per slide.

    `source` can be bytes, a path, or a binary file object. None or empty
    content gives an empty list. Output files are named "<base><n>.pptx" and
    are never cleaned up here; they belong to the caller.
    """
    source = _normalize_source(source)
    if source is None:
        return []

    if filename is None:
        filename = source.name if isinstance(source, Path) else config.DEFAULT_FILENAME

    pptx_mimetype = resolve_mimetype(source, filename, declared=mimetype, detectors=detectors)
    base = filename_base(filename)

    slides_count = count_slides(source, filename)
    if slides_count == 0:
        logger.info(f'{filename} has no slides, nothing to split')
        return []

    if output_dir is None:
        output_dir = tempfile.mkdtemp(prefix=config.TEMP_DIR_PREFIX, dir=config.TEMP_DIR)
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    if max_workers is None:
        max_workers = config.MAX_WORKERS

    logger.info(f'Splitting {filename} ({slides_count} slides) into {output_dir}')

    if max_workers > 1 and slides_count > 1:
        paths = _extract_all_parallel(source, base, output_dir, slides_count, max_workers)
    else:
        paths = [
            _extract_slide(source, i, output_dir / slide_filename(base, i))
            for i in range(slides_count)
        ]

    return [
        ExtractedSlide(slide_index=i, filename=path.name, path=path, mimetype=pptx_mimetype)
        for i, path in enumerate(paths)
    ]


def merge_slides(slides):
    """Recombining single-slide presentations is not supported."""
    raise NotImplementedError('Merging slides into one presentation is not implemented')


def _normalize_source(source):
    """Bytes stay bytes, paths become Path, file objects get read. None for no input."""
    if source is None:
        return None
    if isinstance(source, (str, os.PathLike)):
        path = Path(source)
        if path.is_file() and path.stat().st_size == 0:
            return None
        return path
    if hasattr(source, 'read'):
        source = source.read()
    if not source:
        return None
    return bytes(source)


def _extract_slide(source, slide_index, dest: Path) -> Path:
    """
    Copy the whole source to `dest`, then trim the copy down to the one slide
    at `slide_index` and save it back in place.
    """
    try:
        # Full byte copy, master, layouts and media included
        if isinstance(source, Path):
            shutil.copyfile(source, dest)
        else:
            dest.write_bytes(source)

        prs = open_presentation(dest)
        keep_only_slide(prs, slide_index)
        save_presentation(prs, dest)
    except (OSError, ReadError) as e:
        raise SlideExtractionError(slide_index, dest) from e

    logger.info(f'Saved slide {slide_index + 1} to {dest}')
    return dest


def _extract_all_parallel(source, base, output_dir, slides_count, max_workers):
    """
    Run the per-slide extraction in threads, at most `max_workers` at a time.
    Every slide is attempted; if any failed, the lowest failing index is raised.

    Uses asyncio when no event loop is running in this thread, and a plain
    thread pool when called from inside one.
    """
    jobs = [(source, i, output_dir / slide_filename(base, i)) for i in range(slides_count)]

    try:
        asyncio.get_running_loop()
    except RuntimeError:
        results = asyncio.run(_gather_in_threads(jobs, max_workers))
    else:
        with concurrent.futures.ThreadPoolExecutor(max_workers=max_workers) as pool:
            futures = [pool.submit(_extract_slide, *job) for job in jobs]
            concurrent.futures.wait(futures)
        results = [f.exception() or f.result() for f in futures]

    for result in results:
        if isinstance(result, BaseException):
            raise result
    return results


async def _gather_in_threads(jobs, max_workers):
    sem = asyncio.Semaphore(max_workers)

    async def extract(job):
        async with sem:
            return await asyncio.to_thread(_extract_slide, *job)

    return await asyncio.gather(*(extract(job) for job in jobs), return_exceptions=True)
