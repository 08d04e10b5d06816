from .xmatrix import FormatError, XMatrix
from .layout import LayoutError, default_layout, has_plaintext, valid_end_state
from .neighbors import neighbors
from .walk import WalkResult, merge_results, random_walk
