"""Convenience entry point for running the FastAPI application."""

if __name__ == "__main__":
    import uvicorn

    from enumerations.core.config import settings

    uvicorn.run(
        "enumerations.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_level=settings.loguru_level.lower(),
    )
