from __future__ import annotations

import importlib.metadata


def get_version() -> str | None:
    try:
        return importlib.metadata.version("nte")
    except importlib.metadata.PackageNotFoundError:
        # Running from a source checkout that was never installed
        return None


def get_version_string() -> str:
    return f"nte {get_version() or 'unknown'}"
