"""Run the API with uvicorn: ``python -m nbavalue.api``."""

from __future__ import annotations

import os

import uvicorn

from nbavalue.api import create_app


def main() -> None:
    host = os.getenv("NBAVALUE_HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "4000"))
    uvicorn.run(create_app(), host=host, port=port)


if __name__ == "__main__":
    main()
