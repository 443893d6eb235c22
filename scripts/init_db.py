#!/usr/bin/env python3
"""
Script: init_db.py
Purpose: Create the products, orders and order_items tables

Usage:
    python scripts/init_db.py [--print-sql]

Options:
    --print-sql    Print the schema instead of applying it
"""
import argparse
import logging
from pathlib import Path

from dotenv import load_dotenv

load_dotenv(Path(__file__).parent.parent / '.env')

from order_api.core.database import SCHEMA_SQL, init_schema


def main():
    parser = argparse.ArgumentParser(description="Create the order API database schema")
    parser.add_argument("--print-sql", action="store_true", help="print the schema and exit")
    args = parser.parse_args()

    if args.print_sql:
        print(SCHEMA_SQL)
        return

    logging.basicConfig(level=logging.INFO)
    init_schema()
    print("✅ Schema ready")


if __name__ == "__main__":
    main()
