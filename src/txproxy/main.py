from fastapi import FastAPI

from txproxy.config import settings
from txproxy.errors.handlers import register_error_handlers
from txproxy.middleware import RequestIDMiddleware


def create_app() -> FastAPI:
    """Build the application with the error boundary and request tracing installed.

    Routers proxying to the transaction server are mounted on the returned app;
    whatever they raise is answered by the registered error handlers.
    """
    app = FastAPI(title=settings.app_name)
    app.add_middleware(RequestIDMiddleware)
    register_error_handlers(app)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Liveness check for load balancers and container orchestrators."""
        return {"status": "ok"}

    return app


app = create_app()
