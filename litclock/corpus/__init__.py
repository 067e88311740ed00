from .loader import load_quotes, parse_row
