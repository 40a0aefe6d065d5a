"""
Demo Loader
===========
Loads demo scenarios from YAML and runs them through the workflow.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

from common.exceptions import InvalidHoursError
from common.models import Client, Freelancer
from modules.milestones import create_milestone
from modules.payments import create_payment
from modules.receipts import ReceiptLogger

from .service import Project, WorkflowOutcome

logger = logging.getLogger(__name__)

# Default config location
DEFAULT_CONFIG = Path(__file__).parent / "config.yaml"

# Cache for loaded config
_config_cache: Dict[str, Any] = {}


def load_config(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """Load and cache YAML config."""
    path = Path(config_path) if config_path else DEFAULT_CONFIG
    path_str = str(path)

    if path_str not in _config_cache:
        if not path.exists():
            raise FileNotFoundError(f"Workflow config not found: {path}")

        with open(path) as f:
            _config_cache[path_str] = yaml.safe_load(f) or {}
        logger.debug(f"Loaded workflow config: {path}")

    return _config_cache[path_str]


def clear_cache():
    """Clear config cache (useful for testing)."""
    _config_cache.clear()


def get_receipts_path(config_path: Optional[Path] = None) -> Path:
    """Receipt log path from config, falling back to the default file."""
    config = load_config(config_path)
    receipts = config.get("receipts") or {}
    return Path(receipts.get("path", "payment_receipts.txt"))


def load_scenarios(config_path: Optional[Path] = None) -> List[Dict[str, Any]]:
    """Return the configured demo scenarios in order."""
    return list(load_config(config_path).get("demos") or [])


def build_project(scenario: Dict[str, Any], receipt_logger: ReceiptLogger) -> Project:
    """
    Construct a project from a scenario dict.

    Args:
        scenario: One entry of the 'demos' list
        receipt_logger: Logger shared across demo runs

    Returns:
        Project ready to execute

    Raises:
        InvalidHoursError: scenario sets negative hours on an hourly milestone
        KeyError: required scenario field missing
    """
    client_data = scenario["client"]
    freelancer_data = scenario["freelancer"]
    payment_data = scenario.get("payment", {})
    milestone_data = scenario["milestone"]

    client = Client(
        name=client_data["name"],
        email=client_data["email"],
        company_name=client_data.get("company", ""),
    )
    freelancer = Freelancer(
        name=freelancer_data["name"],
        email=freelancer_data["email"],
        skill_set=freelancer_data.get("skills", ""),
        hourly_rate=float(freelancer_data.get("rate", 0.0)),
    )

    payment = create_payment(
        payment_data.get("type", "escrow"),
        float(payment_data.get("amount", 0.0)),
    )

    hours = milestone_data.get("hours")
    milestone = create_milestone(
        milestone_data.get("type", "fixed"),
        title=milestone_data["title"],
        description=milestone_data.get("description", ""),
        payment=payment,
        amount=float(milestone_data.get("amount", 0.0)),
        hourly_rate=float(milestone_data.get("rate", freelancer.hourly_rate)),
        hours=float(hours) if hours is not None else None,
    )

    return Project(scenario["project"], client, freelancer, milestone, receipt_logger)


def run_demos(
    config_path: Optional[Path] = None,
    receipts_path: Optional[Union[str, Path]] = None,
) -> List[WorkflowOutcome]:
    """
    Run every configured demo sequentially with one shared receipt logger.

    Scenarios rejected while building (invalid hours) never execute and
    are reported as failed outcomes.
    """
    receipt_logger = ReceiptLogger(receipts_path or get_receipts_path(config_path))
    outcomes = []

    for i, scenario in enumerate(load_scenarios(config_path), start=1):
        label = scenario.get("label", scenario["project"])
        print(f"\n--- Demo {i}: {label} ---")

        try:
            project = build_project(scenario, receipt_logger)
        except InvalidHoursError as e:
            print(f"Caught expected exception: {e}")
            logger.warning(f"Demo '{label}' rejected before execution: {e}")
            outcomes.append(WorkflowOutcome.failed(scenario["project"], e))
            continue

        outcomes.append(project.execute_project_workflow())

    succeeded = sum(1 for o in outcomes if o.ok)
    logger.info(f"Demos: {succeeded} of {len(outcomes)} succeeded")
    return outcomes
