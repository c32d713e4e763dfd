"""Services module - Business logic layer"""

from .config_manager import ConfigManager
from .diff_generator import DiffGenerator
from .diff_parser import DiffParser, iter_change_runs
from .git_service import GitService, GitServiceError, InvalidRepositoryError, InvalidRevisionError
from .language import LanguageClassifier, language_for_path
from .step_synthesizer import StepSynthesizer
from .tour_assembler import assemble_tour
from .tour_service import TourService, parse_diff

__all__ = [
    "ConfigManager",
    "DiffGenerator",
    "DiffParser",
    "iter_change_runs",
    "GitService",
    "GitServiceError",
    "InvalidRepositoryError",
    "InvalidRevisionError",
    "LanguageClassifier",
    "language_for_path",
    "StepSynthesizer",
    "assemble_tour",
    "TourService",
    "parse_diff",
]
