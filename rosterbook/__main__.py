"""Run the roster API locally: ``python -m rosterbook``."""
from __future__ import annotations

import os

import uvicorn


def main() -> None:
    uvicorn.run(
        "rosterbook.app:create_app",
        factory=True,
        host=os.getenv("HOST", "127.0.0.1"),
        port=int(os.getenv("PORT", "8000")),
    )


if __name__ == "__main__":
    main()
