from .logger import configure_logging, get_logger
from .text_utils import normalize_apostrophes, normalize_phrase, reflow
