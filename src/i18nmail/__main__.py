"""Entry point for 'python -m i18nmail' command.

This module allows the i18nmail CLI to be invoked using
'python -m i18nmail'.
"""

from i18nmail.cli import main

if __name__ == "__main__":
    main()
