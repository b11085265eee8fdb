import io
import zipfile
from pathlib import Path
from typing import Dict
from pptx import Presentation
from pptx.exc import PackageNotFoundError
from pptx.slide import SlideMaster
from .errors import ReadError


def open_presentation(source, name=None):
    """
    Load a presentation from a path or from raw bytes.
    Anything python-pptx can't open as a presentation becomes a ReadError,
    labelled with `name` when given (the path otherwise).
    """
    if name is None and not isinstance(source, (bytes, bytearray)):
        name = str(source)
    try:
        if isinstance(source, (bytes, bytearray)):
            return Presentation(io.BytesIO(source))
        return Presentation(str(source))
    except (PackageNotFoundError, zipfile.BadZipFile, KeyError, ValueError) as exc:
        label = f' {name!r}' if name else ''
        raise ReadError(f'Not a readable presentation package{label}: {exc}') from exc


def count_slides(source, name=None):
    return len(open_presentation(source, name).slides)


def delete_slide_at(prs, position):
    """
    Remove the slide currently at `position`. Later slides shift down by
    one, so calling this repeatedly with the same position walks the list.
    """
    sld_ids = prs.slides._sldIdLst
    sld_id = sld_ids[position]
    prs.part.drop_rel(sld_id.rId)
    sld_ids.remove(sld_id)


def keep_only_slide(prs, slide_index):
    # Drop everything before the target; it ends up at position 0
    for _ in range(slide_index):
        delete_slide_at(prs, 0)

    # Then everything after it
    remaining = len(prs.slides)
    for _ in range(1, remaining):
        delete_slide_at(prs, 1)


def save_presentation(prs, path: Path):
    with open(path, 'wb') as out:
        prs.save(out)


def get_slide_masters(prs) -> Dict[str, SlideMaster]:
    """
    Map every layout name to the master that owns it.

    Layout names are assumed unique across masters. When two masters have a
    layout with the same name, the later master wins and the earlier entry is
    silently replaced.
    """
    names_and_masters = {}
    for master in prs.slide_masters:
        for layout in master.slide_layouts:
            names_and_masters[layout.name] = master
    return names_and_masters
