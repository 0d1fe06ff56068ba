# gerrymander/config.py
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent
INPUT_DIR = BASE_DIR / "input"
OUTPUT_DIR = BASE_DIR / "output"
LOG_DIR = BASE_DIR / "logs"
OUTPUT_CSV = OUTPUT_DIR / "Fairness_Summary.csv"

# --------------------------------------------------------------------- #
# Input format
# --------------------------------------------------------------------- #
FIELD_DELIMITER: str = ","
SOURCE_ENCODING: str = "utf-8"
FIELDS_PER_DISTRICT: int = 3  # label, democratic, republican

# --------------------------------------------------------------------- #
# Fairness policy (fixed, not user-configurable)
# --------------------------------------------------------------------- #
EFFICIENCY_GAP_THRESHOLD: float = 7.0  # percent
MIN_DISTRICTS: int = 3

# --------------------------------------------------------------------- #
# District plot
# --------------------------------------------------------------------- #
PLOT_WIDTH: int = 100
DEMOCRATIC_MARK: str = "D"
REPUBLICAN_MARK: str = "R"

# --------------------------------------------------------------------- #
# Runtime
# --------------------------------------------------------------------- #
SHOW_PROGRESS: bool = True
