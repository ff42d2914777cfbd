"""Executable entrypoint for `python -m ravenhttp`.

Delegates directly to :func:`ravenhttp.cli.main`.
"""

from ravenhttp.cli import main

if __name__ == "__main__":
    main()
