"""
Run the colorize CLI with ``python -m colorize``.
"""

from colorize.cli import main

if __name__ == "__main__":
    main()
