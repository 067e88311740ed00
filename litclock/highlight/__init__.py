from .aligner import (
    ALIGNERS,
    AlignmentPolicy,
    align_exact,
    align_wrapped,
    find_exact_range,
    highlight,
)
