"""Example: Computing output sizes programmatically."""

import logging

from aspect_ratio import Bounds, DivisionError, ScalingMode, Size
from aspect_ratio.arithmetic import RoundingMode
from aspect_ratio.core.config import ScalingConfig, ScalingConfigBuilder
from aspect_ratio.logging_utils import setup_logging

setup_logging(level=logging.DEBUG)

source = Size(1920, 1080)

# Method 1: Using the fluent bounds
print(source.scale(Bounds.contain().w(1280)))
print(source.scale(Bounds.cover().w(500).h(500)))
print(source.scale(Bounds.exact().w(300).h(300)))  # 300x300

# Method 2: Using builder pattern for engine settings
config = (
    ScalingConfigBuilder()
    .with_mode(ScalingMode.FIT)
    .with_rounding(RoundingMode.FLOOR)
    .with_allow_empty(False)
    .build()
)
print(source.scale_with(Bounds.new().max_dimension(640), config))

# Method 3: Settings from ASPECT_RATIO_ROUNDING / ASPECT_RATIO_DEFAULT_MODE
print(source.scale_with(Bounds.new().h(480), ScalingConfig.from_env()))

# Every mode for a batch of thumbnails
for mode in ScalingMode.iter():
    print(mode, source.scale(Bounds.new().w(256).h(256).with_mode(mode)))

# Degenerate sizes fail with a typed error
try:
    Size(0, 1080).scale(Bounds.fit().w(100))
except DivisionError as e:
    print(f"Cannot scale: {e}")
