#!/usr/bin/env python3
# scripts/generate_openapi.py

import argparse
import json
import os
import sys

# Allow running from the repository root without installing the package
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from worklog.main import app


def main():
    parser = argparse.ArgumentParser(description="Write the API's OpenAPI document to a file")
    parser.add_argument("--output", "-o", default="openapi.json", help="Output path (default: openapi.json)")
    args = parser.parse_args()

    schema = app.openapi()
    with open(args.output, "w", encoding="utf-8") as f:
        json.dump(schema, f, indent=2)

    print(f"OpenAPI document written to {args.output} ({len(schema.get('paths', {}))} paths)")


if __name__ == "__main__":
    main()
