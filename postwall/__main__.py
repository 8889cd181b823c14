"""Run the API: python -m postwall"""
import uvicorn

from postwall.core.config import settings


def main() -> None:
    uvicorn.run("postwall.main:app", host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    main()
