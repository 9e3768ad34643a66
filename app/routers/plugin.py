"""Plugin router serving the manifest, logo and schema document for agent hosts."""
import os

from fastapi import APIRouter, HTTPException, Request, status
from fastapi.responses import FileResponse, Response
import yaml

router = APIRouter(include_in_schema=False)


def _static_file(request: Request, filename: str, media_type: str) -> FileResponse:
    path = os.path.join(request.app.state.settings.static_dir, filename)
    if not os.path.isfile(path):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"{filename} not found"
        )
    return FileResponse(path, media_type=media_type)


@router.get("/logo.png")
async def logo(request: Request):
    """Serve the plugin logo."""
    return _static_file(request, "logo.png", "image/png")


@router.get("/.well-known/ai-plugin.json")
async def plugin_manifest(request: Request):
    """Serve the plugin manifest read by agent hosts."""
    return _static_file(request, "ai-plugin.json", "text/json")


@router.get("/openapi.yaml")
async def openapi_yaml(request: Request):
    """Serve the OpenAPI document as YAML, the format the manifest points at."""
    document = yaml.safe_dump(request.app.openapi(), sort_keys=False, allow_unicode=True)
    return Response(content=document, media_type="application/yaml")


@router.get("/metrics")
async def metrics(request: Request):
    """Report request counters and the number of known users."""
    snapshot = request.app.state.metrics.get_metrics()
    snapshot["users"] = len(request.app.state.todo_store.usernames())
    return snapshot
