"""
Campaign Runner - WhatsApp Batch Dispatch
=========================================

Sends one WhatsApp campaign batch read from an Excel/CSV file.
The file needs a phone column and a message column; headers are
auto-detected.

Usage:
    python run_campaign.py campaign.xlsx [--sheet NAME] [--dry-run]
"""

import argparse
import logging
import sys

from clientreach.application import MarketingWorkflow
from clientreach.domain.errors import ClientReachError
from clientreach.infrastructure.config import get_settings
from clientreach.infrastructure.importer import CampaignSheetParser
from clientreach.web.app import build_workflow

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def run_campaign(file_path: str, sheet_name=None, dry_run: bool = False, workflow: MarketingWorkflow = None) -> int:
    """Run the campaign. Returns a process exit code."""

    print("\n" + "=" * 60)
    print("   ClientReach - Campaign Runner")
    print("=" * 60 + "\n")

    parser = CampaignSheetParser()
    try:
        entries, columns = parser.parse(file_path, sheet_name)
    except (FileNotFoundError, ValueError) as e:
        print(f"Could not read campaign sheet: {e}")
        return 1

    if not entries:
        print("No valid rows found. Nothing to send.")
        return 1

    print(f"Found {len(entries)} recipients (columns: {columns})\n")
    for entry in entries[:5]:
        print(f"   {entry.phone_number}: {entry.message[:50]}")
    if len(entries) > 5:
        print(f"   ... and {len(entries) - 5} more")

    if dry_run:
        print("\nDry run, nothing sent.")
        return 0

    workflow = workflow or build_workflow(get_settings())
    try:
        report = workflow.send_campaign(entries)
    except ClientReachError as e:
        logger.error(f"Campaign failed: {e}")
        print("\nCampaign failed. No messages were confirmed as sent.")
        return 2

    print("\n" + "=" * 60)
    print("Campaign Complete!")
    print(f"   Sent: {len(report.details)}")
    print("=" * 60 + "\n")
    return 0


def main(argv=None) -> int:
    arg_parser = argparse.ArgumentParser(description="Send a WhatsApp campaign from a spreadsheet")
    arg_parser.add_argument("file", help="Path to .xlsx, .xls or .csv file")
    arg_parser.add_argument("--sheet", default=None, help="Sheet name for Excel files")
    arg_parser.add_argument("--dry-run", action="store_true", help="Parse and preview without sending")
    args = arg_parser.parse_args(argv)
    return run_campaign(args.file, args.sheet, args.dry_run)


if __name__ == "__main__":
    sys.exit(main())
