#!/usr/bin/env python3
"""
Test runner for Paddle Duel.

Usage:
    python run_tests.py            # whole suite with a summary
    python run_tests.py physics    # only tests/test_physics.py
"""

import os
import sys
import unittest

ROOT = os.path.dirname(os.path.abspath(__file__))
TESTS_DIR = os.path.join(ROOT, "tests")

# Add project root to path
sys.path.insert(0, ROOT)


def available_components():
    """Names accepted on the command line, one per tests/test_<name>.py."""
    return sorted(
        name[len("test_"):-len(".py")]
        for name in os.listdir(TESTS_DIR)
        if name.startswith("test_") and name.endswith(".py")
    )


def print_summary(result):
    failures = len(result.failures)
    errors = len(result.errors)
    skipped = len(result.skipped)
    passed = result.testsRun - failures - errors - skipped

    print("\n" + "=" * 70)
    print(f"Ran {result.testsRun} tests: {passed} passed, {failures} failed, "
          f"{errors} errors, {skipped} skipped")
    for label, problems in (("FAILED", result.failures), ("ERROR", result.errors)):
        for test, traceback in problems:
            print(f"\n{label}: {test}")
            # The last lines carry the assertion or exception message
            for line in traceback.strip().split("\n")[-3:]:
                print(f"  {line}")
    print("=" * 70)


def run(component=None):
    loader = unittest.TestLoader()
    if component is None:
        suite = loader.discover(TESTS_DIR, pattern="test_*.py", top_level_dir=TESTS_DIR)
    else:
        if component not in available_components():
            print(f"Unknown component: {component}")
            print(f"Available: {', '.join(available_components())}")
            return False
        sys.path.insert(0, TESTS_DIR)
        suite = loader.loadTestsFromName(f"test_{component}")

    result = unittest.TextTestRunner(verbosity=2).run(suite)
    print_summary(result)
    return result.wasSuccessful()


if __name__ == "__main__":
    success = run(sys.argv[1] if len(sys.argv) > 1 else None)
    sys.exit(0 if success else 1)
