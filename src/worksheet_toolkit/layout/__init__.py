"""
Module: layout

Purpose:
    Page layout for worksheets.
    Converts measured elements into grouped, numbered pages.

Key Functions:
    - paginate(): Group measured elements onto pages
    - paginate_fixed(): Fixed elements-per-page strategy
    - decide_move(): Move-back heuristics
    - assemble_pages() / build_result(): Page records and final result

Key Classes:
    - LayoutConfig: Capacity model
    - HeightEstimator: Estimated heights for calibration and fallback
    - PageGroup / GroupingResult: Paginator output

Used By:
    - controller: WorksheetPaginator
    - measurement.provider: Fallback estimates
"""

from .config import LayoutConfig, PAGE_PRESETS
from .estimator import HeightEstimator
from .models import PageGroup, GroupingResult
from .rules import MoveRule, MoveDecision, MOVE_RULES, decide_move
from .paginator import paginate, paginate_fixed
from .assembler import assemble_pages, build_result

__all__ = [
    # Config
    "LayoutConfig",
    "PAGE_PRESETS",
    "HeightEstimator",
    # Models
    "PageGroup",
    "GroupingResult",
    # Rules
    "MoveRule",
    "MoveDecision",
    "MOVE_RULES",
    "decide_move",
    # Functions
    "paginate",
    "paginate_fixed",
    "assemble_pages",
    "build_result",
]
