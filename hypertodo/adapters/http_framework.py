"""
Adapter for HTTP framework (FastAPI).
Isolates FastAPI-specific imports to make library replacement easier.
"""
from typing import Any, Callable

from fastapi import APIRouter, Depends, FastAPI, HTTPException, Path, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import HTMLResponse, JSONResponse, PlainTextResponse, Response


class FastAPIAppAdapter:
    """Wraps a FastAPI application behind the operations the service uses."""

    def __init__(self, app: FastAPI):
        """Initialize with a FastAPI application instance."""
        self._app = app

    def include_router(self, router: Any, **kwargs) -> None:
        """Include another router."""
        self._app.include_router(router, **kwargs)

    def add_middleware(self, middleware_class: type, **kwargs) -> None:
        """Add middleware to the application."""
        self._app.add_middleware(middleware_class, **kwargs)

    def add_exception_handler(self, exc_class: type, handler: Callable) -> None:
        """Register an exception handler."""
        self._app.add_exception_handler(exc_class, handler)

    def set_state(self, name: str, value: Any) -> None:
        """Attach a value to app.state."""
        setattr(self._app.state, name, value)

    @property
    def app(self) -> FastAPI:
        """Get the underlying FastAPI application."""
        return self._app


class HTTPFrameworkAdapter:
    """Adapter for HTTP framework operations."""

    def __init__(self):
        self.FastAPI = FastAPI
        self.APIRouter = APIRouter
        self.HTTPException = HTTPException
        self.Path = Path
        self.Request = Request
        self.Depends = Depends
        self.RequestValidationError = RequestValidationError
        self.Response = Response
        self.HTMLResponse = HTMLResponse
        self.JSONResponse = JSONResponse
        self.PlainTextResponse = PlainTextResponse

    def create_app(self, *args, **kwargs) -> FastAPIAppAdapter:
        """Create a FastAPI application instance wrapped in FastAPIAppAdapter."""
        return FastAPIAppAdapter(self.FastAPI(*args, **kwargs))

    def create_router(self, *args, **kwargs) -> APIRouter:
        """Create an APIRouter instance."""
        return self.APIRouter(*args, **kwargs)
