"""Authgate entrypoint.

Run with:
  python -m authgate
"""

import uvicorn

from authgate.core.config import settings


def main() -> None:
    kwargs = {"host": settings.host, "log_level": settings.log_level.lower()}
    if settings.port is not None:
        kwargs["port"] = settings.port
    uvicorn.run("authgate.main:app", **kwargs)


if __name__ == "__main__":
    main()
