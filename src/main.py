"""
Production FastAPI Application

uvicorn src.main:app
"""

from fastapi.responses import RedirectResponse

from src.platform.app_factory import create_app, service_lifespan


app = create_app(lifespan=service_lifespan('Train Booking'))


@app.get('/', include_in_schema=False)
async def root() -> RedirectResponse:
    return RedirectResponse(url='/docs')
