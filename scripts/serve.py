"""Run the Style Advisor API with uvicorn."""

from __future__ import annotations

import uvicorn

from style_advisor.api.main import create_app
from style_advisor.config.settings import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
