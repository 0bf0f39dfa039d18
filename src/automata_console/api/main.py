"""ASGI entry point for the automata console API."""

from automata_console.api.app import create_app
from automata_console.config import settings

app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "automata_console.api.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=True,
    )
