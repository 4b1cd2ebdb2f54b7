from contextlib import asynccontextmanager
from datetime import datetime, timezone

import uvicorn
from fastapi import FastAPI

import frontend
from admin import router as admin_router
from auth import router as auth_router
from catalog import router as catalog_router
from core import config, errors, middleware, seed
from core.db import Database, database_url
from leads import router as leads_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    # One pool per process; a connection failure here aborts startup.
    db = Database(database_url())
    await db.open()
    app.state.db = db
    try:
        await seed.bootstrap(db)
        yield
    finally:
        await db.close()


def create_app() -> FastAPI:
    app = FastAPI(title="Apex Motors API", lifespan=lifespan)

    errors.register(app)
    app.state.rate_limiter = middleware.install(app)

    @app.get("/api/health", tags=["health"])
    def health() -> dict:
        return {"status": "OK", "timestamp": datetime.now(timezone.utc).isoformat()}

    app.include_router(catalog_router.router, tags=["catalog"])
    app.include_router(leads_router.router, tags=["leads"])
    app.include_router(auth_router.router, tags=["auth"])
    app.include_router(admin_router.router, tags=["admin"])
    # Catch-all page routes go last.
    app.include_router(frontend.router)
    return app


app = create_app()


def run() -> None:
    config.configure_logging()
    uvicorn.run("main:app", host="0.0.0.0", port=config.server_port())


if __name__ == "__main__":
    run()
