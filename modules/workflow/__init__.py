"""
Workflow Module
===============
Project settlement workflow and demo runner.

Usage:
    from modules.workflow import Project, run_demos

    outcome = Project("Website", client, freelancer, milestone).execute_project_workflow()
    print(outcome.ok, outcome.failure)

    outcomes = run_demos()
"""

from .service import (
    Project,
    WorkflowOutcome,
    WorkflowStatus,
    FailureKind,
    classify_failure,
)
from .loader import (
    load_config,
    load_scenarios,
    get_receipts_path,
    build_project,
    run_demos,
    clear_cache,
)

__all__ = [
    "Project",
    "WorkflowOutcome",
    "WorkflowStatus",
    "FailureKind",
    "classify_failure",
    "load_config",
    "load_scenarios",
    "get_receipts_path",
    "build_project",
    "run_demos",
    "clear_cache",
]
