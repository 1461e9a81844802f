"""Run the API with uvicorn"""
import uvicorn

from filmly.config import settings


def main() -> None:
    uvicorn.run("filmly.main:app", host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    main()
