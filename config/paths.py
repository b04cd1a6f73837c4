"""
Project Path Configuration

Centralized path definitions for data and outputs
"""

from pathlib import Path

# Project root
PROJECT_ROOT = Path(__file__).parent.parent

# ==============================================================================
# DATA
# ==============================================================================

DATA_ROOT = PROJECT_ROOT / "data"

# Raw, immutable input (as downloaded)
RAW_DATA = DATA_ROOT / "raw"

# ==============================================================================
# DEFAULT FILES
# ==============================================================================

DEFAULT_WINE_FILE = RAW_DATA / "wineQualityReds.csv"

# ==============================================================================
# OUTPUTS
# ==============================================================================

OUTPUTS_ROOT = PROJECT_ROOT / "outputs"
FIGURES = OUTPUTS_ROOT / "figures"
REPORTS = OUTPUTS_ROOT / "reports"


def output_dirs(output_root=None):
    """Return (figures_dir, reports_dir) under output_root (default: outputs/)"""
    if output_root is None:
        return FIGURES, REPORTS
    output_root = Path(output_root)
    return output_root / "figures", output_root / "reports"


# ==============================================================================
# DIRECTORY INITIALIZATION
# ==============================================================================

def ensure_directories(output_root=None):
    """Create all necessary directories if they don't exist"""
    figures_dir, reports_dir = output_dirs(output_root)

    for directory in [figures_dir, reports_dir]:
        directory.mkdir(parents=True, exist_ok=True)

    return figures_dir, reports_dir
