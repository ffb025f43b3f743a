import logging

from fastapi import FastAPI

from issflyover.api.v1.router import api_router
from issflyover.core import config  # noqa: F401  sets up logging

logger = logging.getLogger(__name__)

app = FastAPI(
    title="ISS Fly-over API",
    description="Upcoming ISS passes for the caller's location.",
    version="0.1.0",
)


@app.get("/ping", tags=["Test"])
async def ping():
    return {"message": "pong"}


app.include_router(api_router, prefix="/api/v1")
logger.info("Included API router v1 at /api/v1.")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
