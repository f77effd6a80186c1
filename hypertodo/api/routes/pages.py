"""
Page routes: the document shell and the demo click target.
"""
from hypertodo.adapters.http_framework import HTTPFrameworkAdapter
from hypertodo.rendering import render_base_html, render_clicked, render_index_body

http_adapter = HTTPFrameworkAdapter()
HTMLResponse = http_adapter.HTMLResponse

router = http_adapter.create_router(tags=["pages"])


@router.get("/", response_class=HTMLResponse)
async def index():
    """Serve the page shell; the body loads the list once shown."""
    return HTMLResponse(render_base_html(render_index_body()))


@router.post("/clicked", response_class=HTMLResponse)
async def clicked():
    return HTMLResponse(render_clicked())
