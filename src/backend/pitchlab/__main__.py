"""Run the Pitchlab API with uvicorn."""

import uvicorn

from pitchlab.config import settings


def run() -> None:
    uvicorn.run("pitchlab.main:app", host=settings.host, port=settings.port, reload=False)


if __name__ == "__main__":
    run()
