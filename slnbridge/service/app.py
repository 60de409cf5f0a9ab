"""FastAPI application entrypoint for slnbridge service mode."""

from __future__ import annotations

import asyncio
from typing import Any, Callable, List, Optional, TypeVar

import uvicorn
from fastapi import FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ..errors import SlnBridgeError
from ..generation import GenerationResult
from ..integration import EditorIntegration

_T = TypeVar("_T")


class SyncRequest(BaseModel):
    path: str = "."


class SyncResponse(BaseModel):
    status: str
    project_paths: List[str]
    solution_path: Optional[str] = None


class OpenRequest(BaseModel):
    path: str = "."
    file: Optional[str] = None
    line: Optional[int] = None
    column: Optional[int] = None
    installation: Optional[str] = None


class OpenResponse(BaseModel):
    opened: bool


class InstallationModel(BaseModel):
    name: str
    path: str


class MatchRequest(BaseModel):
    path: str = "."
    editor_path: str


class MatchResponse(BaseModel):
    matches: bool
    installation: Optional[InstallationModel] = None


class HealthResponse(BaseModel):
    status: str


def create_app(
    integration_factory: Callable[[str], EditorIntegration] = EditorIntegration.from_path,
) -> FastAPI:
    """Create the FastAPI application exposing sync and open operations."""

    app = FastAPI(title="slnbridge Service", version="0.1.0")

    async def _run_blocking(func: Callable[[], _T]) -> _T:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, func)

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.post("/sync", response_model=SyncResponse)
    async def sync(payload: SyncRequest) -> SyncResponse:
        def _sync() -> GenerationResult:
            return integration_factory(payload.path).sync_all()

        result = await _run_blocking(_sync)
        return SyncResponse(
            status="ok",
            project_paths=[str(path) for path in result.project_paths],
            solution_path=str(result.solution_path) if result.solution_path else None,
        )

    @app.post("/open", response_model=OpenResponse)
    async def open_file(payload: OpenRequest) -> OpenResponse:
        def _open() -> bool:
            integration = integration_factory(payload.path)
            if payload.installation:
                if integration.try_get_installation(payload.installation) is None:
                    raise SlnBridgeError(
                        f"'{payload.installation}' is not a {integration.name} installation"
                    )
                integration.installation = payload.installation
            return integration.open_project(payload.file, payload.line, payload.column)

        opened = await _run_blocking(_open)
        return OpenResponse(opened=opened)

    @app.get("/installations", response_model=List[InstallationModel])
    async def installations(path: str = ".") -> List[InstallationModel]:
        found = integration_factory(path).installations()
        return [InstallationModel(name=item.name, path=item.path) for item in found]

    @app.post("/match", response_model=MatchResponse)
    async def match(payload: MatchRequest) -> MatchResponse:
        installation = integration_factory(payload.path).try_get_installation(payload.editor_path)
        if installation is None:
            return MatchResponse(matches=False)
        return MatchResponse(
            matches=True,
            installation=InstallationModel(name=installation.name, path=installation.path),
        )

    @app.exception_handler(FileNotFoundError)
    async def file_not_found_handler(
        _: Any, exc: FileNotFoundError
    ) -> JSONResponse:  # pragma: no cover - simple mapping
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(SlnBridgeError)
    async def slnbridge_error_handler(
        _: Any, exc: SlnBridgeError
    ) -> JSONResponse:  # pragma: no cover - simple mapping
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    return app


def run_service(host: str = "127.0.0.1", port: int = 8765) -> None:  # pragma: no cover - integration path
    app = create_app()
    uvicorn.run(app, host=host, port=port)
