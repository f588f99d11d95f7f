"""
FastAPI routers grouped by resource (authentication, categories, products).

Each module exposes an APIRouter that app.create_app() includes. Handlers only
translate between HTTP and the services in backoffice.services.
"""
