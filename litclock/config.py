import os
from pathlib import Path

_PACKAGE_DIR = Path(__file__).resolve().parent


class Config:
    """Application settings, grouped the way the CLI consumes them."""

    # Default application configuration
    DEFAULT_CONFIG = {
        'mode': 'once',
        'direction': 'backward',
        'wait': 60,  # in seconds
        'width': 60,
    }

    # Reflow indentation for the quotation and its attribution
    WRAP_CONFIG = {
        'initial_indent': '  ',
        'subsequent_indent': '    ',
        'attribution_indent': '        ',
        'attribution_align': 20,
    }

    # Foreground colour and brightness for each paint style
    COLOR_CONFIG = {
        'highlight': {'color': 'red', 'intense': True},
        'inactive': {'color': 'white', 'intense': False},
        'active': {'color': 'white', 'intense': True},
    }

    COLORS = (
        'black', 'blue', 'green', 'red', 'cyan',
        'magenta', 'yellow', 'white', 'grey',
    )

    CORPUS_CONFIG = {
        'path': _PACKAGE_DIR / 'data' / 'litclock_annotated.csv',
        'env_var': 'LITCLOCK_CORPUS',
        'delimiter': '|',
        'encoding': 'utf-8',
    }

    @classmethod
    def corpus_path(cls) -> Path:
        """Corpus location, honouring the LITCLOCK_CORPUS override."""
        override = os.environ.get(cls.CORPUS_CONFIG['env_var'])
        return Path(override) if override else cls.CORPUS_CONFIG['path']
