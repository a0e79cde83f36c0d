"""Entry point for `python -m randomcaser`."""

import sys


def main():
    from randomcaser.app import run_app
    sys.exit(run_app())


if __name__ == "__main__":
    main()
