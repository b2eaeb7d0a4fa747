#!/usr/bin/env python3
"""
Test runner script for PyCoherent.

Shortcuts for the import, unit, integration and CLI test suites.
"""
import sys
import subprocess
import argparse


SUITES = {
    "imports": ("tests/test_imports.py", "Import tests"),
    "unit": ("tests/unit/", "Unit tests"),
    "integration": ("tests/integration/", "Integration tests"),
    "cli": ("tests/unit/test_cli.py", "CLI tests"),
}


def run_command(cmd, description=None):
    """Run a command and return True on success."""
    if description:
        print(f"→ {description}")

    result = subprocess.run(cmd, shell=True)
    return result.returncode == 0


def main():
    parser = argparse.ArgumentParser(
        description="PyCoherent test runner",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_tests.py --imports          # Run only import tests
  python run_tests.py --unit             # Run only unit tests
  python run_tests.py --integration      # Run only integration tests
  python run_tests.py --cli              # Run only the pcn-build tests
  python run_tests.py --all              # Run every suite in turn
  python run_tests.py --fast             # Skip tests marked slow
        """
    )

    for name, (_, description) in SUITES.items():
        parser.add_argument(f'--{name}', action='store_true',
                            help=f'Run {description.lower()} only')
    parser.add_argument('--all', action='store_true',
                        help='Run all suites')
    parser.add_argument('--fast', action='store_true',
                        help='Run fast tests only (exclude slow tests)')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Verbose output')
    parser.add_argument('--coverage', action='store_true',
                        help='Run with coverage report')

    args = parser.parse_args()

    base_cmd = "PYTHONPATH=. python -m pytest"
    base_cmd += " -v" if args.verbose else " -q"
    if args.coverage:
        base_cmd += " --cov=pycoherent --cov-report=html --cov-report=term"

    selected = [name for name in SUITES if getattr(args, name)]

    success = True
    if args.all:
        print("Running complete test suite...")
        for name in ("imports", "unit", "integration"):
            path, description = SUITES[name]
            if not run_command(f"{base_cmd} {path}", description):
                success = False
    elif selected:
        for name in selected:
            path, description = SUITES[name]
            if not run_command(f"{base_cmd} {path}", f"Running {description.lower()}"):
                success = False
    elif args.fast:
        success = run_command(f"{base_cmd} -m 'not slow'", "Running fast tests")
    else:
        cmd = f"{base_cmd} tests/test_imports.py tests/unit/"
        success = run_command(cmd, "Running basic test suite (imports + unit tests)")

    if success:
        print("\n✅ All tests passed!")
        return 0
    print("\n❌ Some tests failed!")
    return 1


if __name__ == '__main__':
    sys.exit(main())
