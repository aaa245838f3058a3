from .errors import BuildError, OutputPreparationError, RecipeError, RelocationError, ReportError
from .orchestrator import ReportOrchestrator, run
from .runtime import REPORT_FILE, ExitStatus, ReportRun

__all__ = [
    "BuildError",
    "ExitStatus",
    "OutputPreparationError",
    "REPORT_FILE",
    "RecipeError",
    "RelocationError",
    "ReportError",
    "ReportOrchestrator",
    "ReportRun",
    "run",
]
