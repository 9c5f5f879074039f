#!/usr/bin/env python3
"""
Main test runner for the Poem lexer tests.

Runs the unittest suites without needing pytest. The CLI tests use pytest
fixtures; run them with `pytest tests/test_cli.py`.

Author: xwest
"""

import sys
import os
import unittest

# Add the project root to the Python path
project_root = os.path.abspath(os.path.dirname(__file__))
sys.path.insert(0, project_root)

TEST_MODULES = [
    "tests.test_lexer",
    "tests.test_rules",
    "tests.test_diagnostics",
]


def run_all_tests():
    """Run all Poem lexer tests."""

    print("🚀 Poem Lexer Test Suite")
    print("=" * 60)

    # Test if basic imports work
    try:
        from poem.lexer import Lexer, LexerError

        print("✅ Lexer modules imported successfully")
        print()

    except ImportError as e:
        print(f"❌ Failed to import lexer modules: {e}")
        return False

    # Smoke test on a whole program
    print("Testing a rail program...")
    code = (
        'use std\n'
        'rail:\n'
        '  sum 10 11\n'
        '  div 20\n'
        'on success value : print f"success {e}"\n'
        'on error value : print f"error {e}"\n'
    )
    try:
        lexer = Lexer(code, "<smoke>")
        tokens = lexer.tokenize()
        print(f"  🔧 Generated {len(tokens)} tokens")
        print("  " + " ".join(str(token) for token in tokens[:8]) + " ...")
        print()

    except LexerError as e:
        print(f"❌ Smoke test FAILED:\n{e}")
        return False

    # Run the unit test suites
    loader = unittest.TestLoader()
    suite = unittest.TestSuite()
    for module in TEST_MODULES:
        suite.addTests(loader.loadTestsFromName(module))

    result = unittest.TextTestRunner(verbosity=2).run(suite)

    print()
    if result.wasSuccessful():
        print(f"✅ All {result.testsRun} tests PASSED")
    else:
        print(f"❌ {len(result.failures)} failures, {len(result.errors)} errors")

    return result.wasSuccessful()


if __name__ == "__main__":
    success = run_all_tests()
    sys.exit(0 if success else 1)
