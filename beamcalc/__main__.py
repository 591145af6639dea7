import sys
import unittest


def run_tests():
    try:
        # 'beamcalc' has to be importable, i.e. installed or run from the
        # directory containing the package.
        from beamcalc import tests
        from beamcalc.t.core import test_equations
    except ImportError:
        print("Error: Could not find the tests module.")
        print("Make sure you are running the command in the project's root "
              "directory.")
        sys.exit(1)

    loader = unittest.TestLoader()
    suite = unittest.TestSuite([
        loader.loadTestsFromModule(tests),
        loader.loadTestsFromModule(test_equations),
    ])

    # verbosity=0 shows only the summary.
    runner = unittest.TextTestRunner(verbosity=0)
    result = runner.run(suite)

    sys.exit(not result.wasSuccessful())


if __name__ == '__main__':
    if len(sys.argv) > 1 and sys.argv[1] == 'test':
        run_tests()
    else:
        print("Unknown command.")
        print("Usage: python -m beamcalc test")
