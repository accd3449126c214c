"""
Project configuration settings.

Edit the variables in this module to point to your data directories and
source URLs.  Values that commonly differ between machines can be set
through environment variables (or a ``.env`` file) instead of editing
this file.
"""

from pathlib import Path
import os

from dotenv import load_dotenv

load_dotenv()

# Base directory for storing input and output data (default: working directory).
BASE_DIR: Path = Path(os.getenv("NMC_POLITY_HOME", str(Path.cwd())))

###############################################################################
# Source datasets
###############################################################################

# National Material Capabilities (Correlates of War), abridged release.
NMC_URL: str = os.getenv(
    "NMC_URL",
    "https://correlatesofwar.org/wp-content/uploads/NMC-60-abridged.zip",
)
NMC_FILENAME: str = os.getenv("NMC_FILENAME", "NMC-60-abridged.csv")

# Polity5 annual time series.
POLITY_URL: str = os.getenv(
    "POLITY_URL", "http://www.systemicpeace.org/inscr/p5v2018.xls"
)
POLITY_FILENAME: str = os.getenv("POLITY_FILENAME", "p5v2018.xls")

###############################################################################
# Columns
###############################################################################

CODE_COLUMN: str = "ccode"
YEAR_COLUMN: str = "year"
NAME_COLUMN: str = "country"

CAPABILITY_COLUMNS: list[str] = [
    "milex", "milper", "irst", "pec", "tpop", "upop", "cinc",
]

REGIME_COLUMNS: list[str] = [
    "democ", "autoc", "polity", "polity2", "durable",
    "xrreg", "xrcomp", "xropen", "xconst",
    "parreg", "parcomp", "exrec", "exconst", "polcomp",
]

# Identifiers and release markers that carry no analytic content.
CAPABILITY_DROP_COLUMNS: list[str] = ["stateabb", "version"]
REGIME_DROP_COLUMNS: list[str] = ["p5", "cyear", "scode", "flag", "fragment"]

# Regime-transition auxiliary columns in Polity5.
REGIME_TRANSITION_COLUMNS: list[str] = [
    "prior", "emonth", "eday", "eyear", "eprec", "interim",
    "bmonth", "bday", "byear", "bprec", "post", "change",
    "d5", "sf", "regtrans",
]

# Polity special codes: -66 interruption, -77 interregnum, -88 transition.
REGIME_SPECIAL_VALUES: tuple[int, ...] = (-66, -77, -88)

# NMC marks missing values with -9.
CAPABILITY_MISSING_VALUE: int = -9

###############################################################################
# Directory paths
###############################################################################

DATA_DIR: Path = Path(os.getenv("DATA_DIR", str(BASE_DIR / "data")))

# Raw downloads are stored here
RAW_DATA_DIR: Path = DATA_DIR / "raw"

# Cleaned tables are stored here
PROCESSED_DATA_DIR: Path = DATA_DIR / "processed"

# Merged state-year table, conflict report, summaries and figures
RESULTS_DIR: Path = Path(os.getenv("RESULTS_DIR", str(BASE_DIR / "results")))


def ensure_directories() -> None:
    """Create the data and results directories if they do not already exist."""
    for _dir in (RAW_DATA_DIR, PROCESSED_DATA_DIR, RESULTS_DIR):
        _dir.mkdir(parents=True, exist_ok=True)
