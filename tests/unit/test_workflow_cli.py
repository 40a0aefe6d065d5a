"""
Unit Tests for the workflow and receipts CLIs.
"""

import sys
from unittest.mock import patch

import pytest

from modules.milestones import FixedPriceMilestone, HourlyMilestone
from modules.payments import Direct, Escrow
from modules.receipts import ReceiptLogger
from modules.workflow.cli import prompt_custom_project


def answers(*values):
    """input() replacement returning the given answers in order."""
    it = iter(values)
    return lambda prompt: next(it)


PARTICIPANTS = (
    "John", "john@x.com", "TechCorp",
    "Alice", "a@x.com", "Dev", "75",
    "Shop", "Website", "desc",
)


class TestPromptCustomProject:

    def test_fixed_escrow(self, receipts_file):
        project = prompt_custom_project(answers(*PARTICIPANTS, "1", "1", "2500"), receipts_file)

        assert project.name == "Shop"
        assert project.client.company_name == "TechCorp"
        assert isinstance(project.milestone, FixedPriceMilestone)
        assert isinstance(project.milestone.payment, Escrow)
        assert project.milestone.payment.get_amount() == 2500.0
        assert project.receipt_logger.path == receipts_file

    def test_hourly_direct_uses_freelancer_rate(self, receipts_file):
        project = prompt_custom_project(answers(*PARTICIPANTS, "2", "2", "8"), receipts_file)

        assert isinstance(project.milestone, HourlyMilestone)
        assert isinstance(project.milestone.payment, Direct)
        assert project.milestone.hourly_rate == 75.0
        assert project.milestone.hours_worked == 8.0

    def test_negative_hours_abort(self, receipts_file, capsys):
        project = prompt_custom_project(answers(*PARTICIPANTS, "2", "1", "-5"), receipts_file)

        assert project is None
        assert "Invalid hours input. Aborting." in capsys.readouterr().out

    def test_reprompts_bad_numbers_and_choices(self, receipts_file, capsys):
        values = list(PARTICIPANTS)
        values[6:7] = ["lots", "75"]
        project = prompt_custom_project(answers(*values, "3", "1", "1", "abc", "100"), receipts_file)

        assert project.freelancer.hourly_rate == 75.0
        assert project.milestone.fixed_amount == 100.0
        out = capsys.readouterr().out
        assert "'lots' is not a number" in out
        assert "Please enter 1 or 2." in out

    def test_input_ending_early_aborts(self, receipts_file, capsys):
        it = iter(PARTICIPANTS[:4])

        def closed_stdin(prompt):
            try:
                return next(it)
            except StopIteration:
                raise EOFError from None

        project = prompt_custom_project(closed_stdin, receipts_file)

        assert project is None
        assert "Input ended before the project was complete. Aborting." in capsys.readouterr().out


class TestWorkflowMain:

    def test_demo_exit_status(self, receipts_file):
        from modules.workflow.cli import main

        # default demos include the rejected negative-hours scenario
        with patch.object(sys, "argv", ["workflow", "demo", "--receipts", str(receipts_file)]):
            with pytest.raises(SystemExit) as exc:
                main()

        assert exc.value.code == 1
        assert len(ReceiptLogger(receipts_file).read_receipts()) == 1

    def test_custom_success(self, receipts_file):
        from modules.workflow.cli import main

        with patch.object(sys, "argv", ["workflow", "custom", "--receipts", str(receipts_file)]), \
                patch("builtins.input", answers(*PARTICIPANTS, "1", "2", "300")):
            with pytest.raises(SystemExit) as exc:
                main()

        assert exc.value.code == 0
        receipts = ReceiptLogger(receipts_file).read_receipts()
        assert [(r.amount, r.payment_type) for r in receipts] == [(300.0, "Direct")]


class TestReceiptsMain:

    def test_list(self, receipt_logger, receipts_file, capsys):
        from modules.receipts.cli import main

        receipt_logger.log_payment_receipt("Website", 2500.0, "Escrow")
        capsys.readouterr()

        with patch.object(sys, "argv", ["receipts", "list", "--receipts", str(receipts_file)]):
            main()

        out = capsys.readouterr().out
        assert "1 receipts" in out
        assert "Website" in out
        assert "Escrow" in out

    def test_unreadable_log_exits_nonzero(self, tmp_path, capsys):
        from modules.receipts.cli import main

        with patch.object(sys, "argv", ["receipts", "list", "--receipts", str(tmp_path)]):
            with pytest.raises(SystemExit) as exc:
                main()

        assert exc.value.code == 1
        err = capsys.readouterr().err
        assert "Cannot read receipts from" in err
        assert len(err.strip().splitlines()) == 1
