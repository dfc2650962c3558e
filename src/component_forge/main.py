"""
Component Forge - Panel Server
FastAPI host for the generator panel.
"""

import asyncio
import json
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, WebSocket, WebSocketDisconnect
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from .core import Settings, configure_logging, create_container, get_logger, get_settings
from .handlers import PanelHandler, error_response


logger = get_logger(__name__)


class GenerateBody(BaseModel):
    text: str
    image: str | None = None
    create_file: bool = True
    create_storybook: bool = False
    create_mock_data: bool = False
    output_path: str | None = None


class FormatBody(BaseModel):
    text: str


def create_app(settings: Settings | None = None, **container_kwargs: Any) -> FastAPI:
    """
    Build the panel server.

    Keyword arguments are forwarded to ``create_container`` (key prompt,
    folder chooser, model factory).
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Wire dependencies on startup."""
        app.state.settings = settings
        app.state.container = create_container(settings, **container_kwargs)
        logger.info("server_ready", workspace=str(settings.workspace_root), model=settings.model_name)
        yield
        logger.info("server_shutdown")

    app = FastAPI(
        title="Component Forge",
        description="Generate React components from natural-language descriptions",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Panel is served from the editor host on another origin
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health():
        """Health check."""
        return {
            "status": "healthy",
            "model": app.state.settings.model_name,
            "workspace": str(app.state.settings.workspace_root),
        }

    @app.post("/generate")
    async def generate(body: GenerateBody):
        """One-shot generation; returns the panel responses."""
        handler = app.state.container.get(PanelHandler)
        message = {"command": "generate-component", **body.model_dump()}
        loop = asyncio.get_running_loop()
        return {"responses": await loop.run_in_executor(None, handler.handle, message)}

    @app.post("/format")
    async def format_description(body: FormatBody):
        handler = app.state.container.get(PanelHandler)
        message = {"command": "format-description", "text": body.text}
        loop = asyncio.get_running_loop()
        return {"responses": await loop.run_in_executor(None, handler.handle, message)}

    @app.websocket("/panel")
    async def panel(websocket: WebSocket):
        """
        Panel message loop.

        Client sends: {"command": "generate-component" | "browse-folder" | "format-description"
                      | "set-api-key" | "ping", ...}
        Server sends: {"command": "result" | "error" | "folder-selected" | "description-formatted"
                      | "api-key-saved" | "pong", ...}
        """
        await websocket.accept()
        handler = app.state.container.get(PanelHandler)
        connection_id = id(websocket)
        logger.info("panel_connected", connection_id=connection_id)
        loop = asyncio.get_running_loop()

        try:
            while True:
                try:
                    data = json.loads(await websocket.receive_text())
                except json.JSONDecodeError:
                    data = None
                if not isinstance(data, dict):
                    await websocket.send_json(error_response("Messages must be JSON objects"))
                    continue
                # Requests are processed one at a time per connection
                responses = await loop.run_in_executor(None, handler.handle, data)
                for response in responses:
                    await websocket.send_json(response)
        except WebSocketDisconnect:
            logger.info("panel_disconnected", connection_id=connection_id)

    return app


def run(settings: Settings | None = None, **container_kwargs: Any) -> None:
    """Serve the panel with uvicorn; keyword arguments go to ``create_app``."""
    import uvicorn

    settings = settings or get_settings()
    configure_logging(settings.log_level, settings.json_logs)
    uvicorn.run(
        create_app(settings, **container_kwargs),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
