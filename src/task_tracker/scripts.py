import subprocess
import sys


def test():
    """Run the test suite."""
    sys.exit(subprocess.call(["pytest", "tests"]))


def lint():
    """Run ruff lint and format checks over src and tests."""
    print("Running ruff check...")
    rc = subprocess.call(["ruff", "check", "src", "tests"])
    if rc != 0:
        sys.exit(rc)

    print("Running ruff format --check...")
    sys.exit(subprocess.call(["ruff", "format", "--check", "src", "tests"]))


def format():
    """Apply ruff formatting."""
    sys.exit(subprocess.call(["ruff", "format", "src", "tests"]))
