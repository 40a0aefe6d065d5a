"""Receipts CLI."""
import argparse
import sys
from pathlib import Path

from common.models import format_amount

from .service import DEFAULT_RECEIPTS_FILE, ReceiptLogger, format_timestamp


def main():
    parser = argparse.ArgumentParser(description='Payment Receipts')
    parser.add_argument('command', choices=['list'])
    parser.add_argument('--receipts', type=Path, default=DEFAULT_RECEIPTS_FILE, help='Receipt log file')
    args = parser.parse_args()

    try:
        receipts = ReceiptLogger(args.receipts).read_receipts()
    except (OSError, UnicodeDecodeError) as e:
        print(f'❌ Cannot read receipts from {args.receipts}: {e}', file=sys.stderr)
        sys.exit(1)
    print(f'🧾 {len(receipts)} receipts in {args.receipts}:')
    for r in receipts:
        print(
            f'   {format_timestamp(r.timestamp)}  {r.payment_type:<6}  '
            f'${format_amount(r.amount):>10}  {r.milestone_title}'
        )


if __name__ == '__main__':
    main()
