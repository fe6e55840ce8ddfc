"""Module entrypoint for ``python -m lsnewer``.

Behaves exactly like the ``lsnewer`` console script.
"""

from .cli import main


if __name__ == "__main__":
    main()
