"""
Configuration & Defaults
========================
Central place for the default parameters of the snowflake exploration.

Exports:
    DEFAULT_LEVEL (int): Iteration level of the curve that is plotted and deformed.
    DEFAULT_MAX_LEVEL (int): Highest level used in the length study.
    DEFAULT_SAMPLES (int): Uniform samples per curve (breakpoints are always added).
    OUTPUT_PATH (str): Suggested directory for saved figures, relative to the working directory.
"""
DEFAULT_LEVEL: int = 3
DEFAULT_MAX_LEVEL: int = 3
DEFAULT_SAMPLES: int = 2000

# Plot styling
LINE_WIDTH: float = 1.0
FONT_SIZE: int = 14
FILL_COLOR: tuple[float, float, float] = (0.6, 0.6, 1.0)
EDGE_COLOR: str = "r"
EDGE_WIDTH: float = 3.0

OUTPUT_PATH: str = "figures"
