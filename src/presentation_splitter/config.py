import os
import tempfile
from dotenv import load_dotenv

load_dotenv()


def env_int(name, default):
    """Integer setting from the environment; a non-integer value names the variable in the error."""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f'{name} must be an integer, got {raw!r}') from None


# Output naming
FILENAME_SEPARATOR = '-'
OUTPUT_EXTENSION = '.pptx'
DEFAULT_FILENAME = 'presentation.pptx'

PPTX_MIMETYPE = 'application/vnd.openxmlformats-officedocument.presentationml.presentation'

# Where each split gets its own working directory
TEMP_DIR = os.getenv('PRESENTATION_SPLITTER_TEMP_DIR') or tempfile.gettempdir()
TEMP_DIR_PREFIX = 'pptx-split-'

# 1 keeps the per-slide loop sequential
MAX_WORKERS = env_int('PRESENTATION_SPLITTER_MAX_WORKERS', 1)

LOG_LEVEL = os.getenv('PRESENTATION_SPLITTER_LOG_LEVEL', 'INFO').upper()
