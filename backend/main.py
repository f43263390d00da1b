import os

from fastapi.openapi.utils import get_openapi
from dotenv import load_dotenv

# Load environment variables for development before the app reads settings
load_dotenv()

from app.main import app  # noqa: E402


def custom_openapi() -> dict:
    """Return OpenAPI schema with project metadata."""
    if app.openapi_schema:
        return app.openapi_schema
    app.openapi_schema = get_openapi(
        title="Good Day Services Quotes API",
        version="1.0.0",
        description="Restoration and property cleaning quotes, quote requests and quote delivery.",
        contact={"name": "Good Day Services", "email": "GoodDayServicesHQ@gmail.com"},
        routes=app.routes,
    )
    return app.openapi_schema


app.openapi = custom_openapi

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=int(os.getenv("PORT", "8000")),
        reload=os.getenv("UVICORN_RELOAD", "1") == "1",
        workers=int(os.getenv("UVICORN_WORKERS", "1")),
        timeout_keep_alive=int(os.getenv("UVICORN_KEEPALIVE", "65")),
    )
