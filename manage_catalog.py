#!/usr/bin/env python3
"""
Catalog Management Script

A simple wrapper script to run catalog management commands.
This script makes it easier to inspect and export the catalog without
remembering Flask CLI syntax.
"""

import os
import sys
import subprocess


def run_command(command):
    """Run a command and return whether it succeeded."""
    try:
        result = subprocess.run(command, check=True, capture_output=True, text=True)
        print(result.stdout)
        return True
    except subprocess.CalledProcessError as e:
        print(f"Error running command: {e}")
        print(f"Error output: {e.stderr}")
        return False


def print_help():
    print("Catalog Management Commands")
    print("=" * 30)
    print()
    print("categories         - Display the category taxonomy with active counts")
    print()
    print("export <path>      - Write the current catalog to a JSON file")
    print("                     Point CATALOG_PATH at it to serve it later")
    print()
    print("help               - Show this help message")
    print()
    print("Examples:")
    print("  python manage_catalog.py categories")
    print("  python manage_catalog.py export catalog.json")


def main():
    """Main function to handle catalog management."""

    if len(sys.argv) < 2:
        print("Catalog Management Script")
        print("=" * 30)
        print("Usage:")
        print("  python manage_catalog.py categories")
        print("  python manage_catalog.py export <path>")
        print("  python manage_catalog.py help")
        return

    action = sys.argv[1].lower()

    # Set Flask app environment variable
    os.environ["FLASK_APP"] = "main.setup:create_app"

    if action == "categories":
        command = ["flask", "list-categories"]
        print(f"Running: {' '.join(command)}")
        if not run_command(command):
            print("\n❌ Failed to list categories.")

    elif action == "export":
        if len(sys.argv) < 3:
            print("Missing output path. Usage: python manage_catalog.py export <path>")
            return
        command = ["flask", "export-catalog", sys.argv[2]]
        print(f"Running: {' '.join(command)}")
        if run_command(command):
            print(f"\n✅ Catalog exported to {sys.argv[2]}")
        else:
            print("\n❌ Failed to export catalog.")

    elif action == "help":
        print_help()

    else:
        print(f"Unknown action: {action}")
        print("Run 'python manage_catalog.py help' for usage information.")


if __name__ == "__main__":
    main()
