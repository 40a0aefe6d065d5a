#!/usr/bin/env python3
"""Unified CLI for the Freelance Workflow Engine.

Usage:
    python cli.py workflow --help
    python cli.py receipts --help
"""
import sys
import argparse


def main():
    parser = argparse.ArgumentParser(
        description='Freelance Workflow Engine',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Modules:
  workflow   Run milestone settlement workflows (demo or interactive)
  receipts   Inspect the payment receipt log

Examples:
  python cli.py workflow demo
  python cli.py workflow demo --receipts /tmp/receipts.txt -v
  python cli.py workflow custom
  python cli.py receipts list
"""
    )

    parser.add_argument(
        'module',
        choices=['workflow', 'receipts'],
        help='Module to run'
    )

    # Parse just the module, pass rest to submodule
    args, remaining = parser.parse_known_args()

    if args.module == 'workflow':
        from modules.workflow.cli import main as workflow_main
        sys.argv = ['workflow'] + remaining
        workflow_main()

    elif args.module == 'receipts':
        from modules.receipts.cli import main as receipts_main
        sys.argv = ['receipts'] + remaining
        receipts_main()


if __name__ == '__main__':
    main()
