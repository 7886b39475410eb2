"""Run the API with uvicorn: python -m socialid.api"""

import uvicorn

from socialid.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "socialid.api.app:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
