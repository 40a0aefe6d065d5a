"""Workflow CLI."""
import argparse
import logging
import sys
from pathlib import Path
from typing import Callable, Optional

from common.exceptions import InvalidHoursError
from common.models import Client, Freelancer
from modules.milestones import create_milestone
from modules.payments import create_payment
from modules.receipts import ReceiptLogger

from .loader import get_receipts_path, run_demos
from .service import Project


def _ask(input_fn: Callable[[str], str], prompt: str) -> str:
    return input_fn(prompt).strip()


def _ask_number(input_fn: Callable[[str], str], prompt: str) -> float:
    """Prompt until the answer parses as a number."""
    while True:
        answer = _ask(input_fn, prompt)
        try:
            return float(answer)
        except ValueError:
            print(f"   '{answer}' is not a number, try again.")


def _ask_choice(input_fn: Callable[[str], str], prompt: str) -> str:
    while True:
        answer = _ask(input_fn, prompt)
        if answer in ('1', '2'):
            return answer
        print("   Please enter 1 or 2.")


def prompt_custom_project(
    input_fn: Optional[Callable[[str], str]] = None,
    receipts_path: Optional[Path] = None,
) -> Optional[Project]:
    """
    Collect a project interactively.

    Returns:
        Project, or None when the hours entered are invalid or input ends early
    """
    print("\n--- CREATE CUSTOM PROJECT ---")
    try:
        return _collect_project(input_fn or input, receipts_path)
    except EOFError:
        print("\nInput ended before the project was complete. Aborting.")
        return None


def _collect_project(input_fn: Callable[[str], str], receipts_path: Optional[Path]) -> Optional[Project]:
    client = Client(
        name=_ask(input_fn, "Enter Client Name: "),
        email=_ask(input_fn, "Enter Client Email: "),
        company_name=_ask(input_fn, "Enter Client Company: "),
    )
    freelancer = Freelancer(
        name=_ask(input_fn, "Enter Freelancer Name: "),
        email=_ask(input_fn, "Enter Freelancer Email: "),
        skill_set=_ask(input_fn, "Enter Freelancer Skill: "),
        hourly_rate=_ask_number(input_fn, "Enter Freelancer Hourly Rate: "),
    )

    project_name = _ask(input_fn, "Enter Project Name: ")
    title = _ask(input_fn, "Enter Milestone Title: ")
    description = _ask(input_fn, "Enter Milestone Description: ")

    milestone_choice = _ask_choice(input_fn, "Select Milestone Type (1: Fixed Price, 2: Hourly): ")
    payment_choice = _ask_choice(input_fn, "Select Payment Method (1: Escrow, 2: Direct): ")

    if milestone_choice == '1':
        amount = _ask_number(input_fn, "Enter Fixed Price Amount: ")
        milestone = create_milestone(
            'fixed', title, description, create_payment(payment_choice, amount), amount=amount,
        )
    else:
        # Hourly payments are calculated from the freelancer rate
        hours = _ask_number(input_fn, "Enter Hours Worked: ")
        try:
            milestone = create_milestone(
                'hourly', title, description, create_payment(payment_choice, 0.0),
                hourly_rate=freelancer.hourly_rate, hours=hours,
            )
        except InvalidHoursError:
            print("Invalid hours input. Aborting.")
            return None

    return Project(project_name, client, freelancer, milestone, ReceiptLogger(receipts_path))


def main():
    parser = argparse.ArgumentParser(description='Freelance Workflow Engine')
    parser.add_argument('command', choices=['demo', 'custom'])
    parser.add_argument('--config', type=Path, help='Demo config (YAML)')
    parser.add_argument('--receipts', type=Path, help='Receipt log file')
    parser.add_argument('-v', '--verbose', action='store_true', help='Debug logging')
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )

    print('=== Freelance Workflow Engine ===')

    if args.command == 'demo':
        outcomes = run_demos(args.config, args.receipts)
        ok = all(o.ok for o in outcomes)
    else:
        receipts = args.receipts or get_receipts_path(args.config)
        project = prompt_custom_project(receipts_path=receipts)
        ok = project is not None and project.execute_project_workflow().ok

    sys.exit(0 if ok else 1)


if __name__ == '__main__':
    main()
