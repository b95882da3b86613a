"""Entry point for ``python -m lifeconv``."""

from __future__ import annotations


def main() -> int:
    """Bootstrap and run the lifeconv CLI."""
    from lifeconv.cli import main as cli_main

    return cli_main()


if __name__ == "__main__":
    raise SystemExit(main())
