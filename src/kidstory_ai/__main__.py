"""Run with: python -m kidstory_ai"""

import uvicorn

from kidstory_ai.config import get_settings

if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run(
        "kidstory_ai.main:app",
        host=settings.host,
        port=settings.port,
    )
