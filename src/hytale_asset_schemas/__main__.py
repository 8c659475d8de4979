"""Module entry point for `python -m hytale_asset_schemas`."""

from .cli import main

if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
