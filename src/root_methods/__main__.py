"""
Run the worked root-finding exercises from the command line.

    python -m root_methods [--verbose] [--debug] [--log-file PATH]
"""
import argparse
from typing import List, Optional

from root_methods.wrappers import run_demo


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="root-methods", add_help=True)
    parser.add_argument("--verbose", action="store_true", help="Log progress at the INFO level")
    parser.add_argument("--debug", action="store_true", help="Log solver exit statuses")
    parser.add_argument("--log-file", default=None, help="Write the log to this file")

    ns = parser.parse_args(argv)
    run_demo(verbose=ns.verbose, debug=ns.debug, log_file=ns.log_file)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
