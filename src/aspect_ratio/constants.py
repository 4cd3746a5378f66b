"""Centralized constants for aspect_ratio."""

import numpy as np

# Dimension type
DIMENSION_DTYPE = np.uint32
FLOAT_DTYPE = np.float64
MAX_DIMENSION = int(np.iinfo(DIMENSION_DTYPE).max)

# Environment
ENV_LOG_LEVEL = "ASPECT_RATIO_LOG_LEVEL"
ENV_LOG_PATH = "ASPECT_RATIO_LOG_PATH"
ENV_ROUNDING = "ASPECT_RATIO_ROUNDING"
ENV_DEFAULT_MODE = "ASPECT_RATIO_DEFAULT_MODE"

# Size display
SIZE_SEPARATOR = "x"
