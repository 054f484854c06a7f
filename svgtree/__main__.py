"""Serve the svgtree API with uvicorn: `python -m svgtree` or `svgtree-serve`."""

from __future__ import annotations

import uvicorn

from svgtree.config import settings


def main() -> None:
    """Launch svgtree.main:app on the configured host and port."""
    uvicorn.run(
        "svgtree.main:app",
        host=settings.svgtree_host,
        port=settings.svgtree_port,
        log_level=settings.svgtree_log_level.lower(),
    )


if __name__ == "__main__":
    main()
