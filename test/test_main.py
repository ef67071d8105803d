"""
Test-specific FastAPI Application

Same factory and lifespan as production. DATABASE_URL points at in-memory
SQLite (see conftest), so every TestClient context starts from empty tables.
"""

from src.platform.app_factory import create_app, service_lifespan


app = create_app(
    lifespan=service_lifespan('Test App'),
    title_suffix=' (Test)',
    description='Test Application - in-memory SQLite',
)
