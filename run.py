"""Start the morTodo API server."""

import uvicorn

from src.config import settings


def main() -> None:
    uvicorn.run(
        "src.main:app",
        host=settings.server_host,
        port=settings.server_port,
        log_level=settings.log_level,
    )


if __name__ == "__main__":
    main()
