#!/usr/bin/env python3
"""
Scan a Directory

Runs a listing or a metadata probe against a local path through the same
path guard and listing engine the API uses, and prints the JSON result.

Usage:
    python scripts/scan_directory.py /srv/data
    python scripts/scan_directory.py /srv/data --sort-by size --sort-order desc --limit 20
    python scripts/scan_directory.py /srv/data --metadata
"""

import argparse
import asyncio
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from dirlist.models.query import ListingQuery, SortKey, SortOrder
from dirlist.services import FilesystemService, ListingService, MetadataService
from dirlist.services.errors import DirectoryServiceError


async def run(args: argparse.Namespace) -> str:
    fs = FilesystemService()

    if args.metadata:
        result = await MetadataService(fs).describe(args.path, timeout=args.timeout)
    else:
        query = ListingQuery(
            page=args.page,
            limit=args.limit,
            include_hidden=args.include_hidden,
            sort_by=args.sort_by,
            sort_order=args.sort_order,
        )
        result = await ListingService(fs).list_directory(args.path, query, timeout=args.timeout)

    return result.model_dump_json(by_alias=True, indent=2)


def main():
    parser = argparse.ArgumentParser(description="List a directory or probe its metadata")
    parser.add_argument("path", help="Directory path")
    parser.add_argument("--metadata", action="store_true", help="Print metadata instead of a listing")
    parser.add_argument("--page", type=int, default=1, help="Page number (default: 1)")
    parser.add_argument("--limit", type=int, default=100, help="Items per page (default: 100)")
    parser.add_argument("--include-hidden", action="store_true", help="Include hidden entries")
    parser.add_argument("--sort-by", choices=[k.value for k in SortKey], default=SortKey.NAME.value)
    parser.add_argument("--sort-order", choices=[o.value for o in SortOrder], default=SortOrder.ASC.value)
    parser.add_argument("--timeout", type=float, default=None, help="Scan deadline in seconds")
    args = parser.parse_args()

    try:
        print(asyncio.run(run(args)))
    except DirectoryServiceError as e:
        print(f"✗ {e.message} (status {e.status_code})", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
