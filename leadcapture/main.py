"""
Main FastAPI application
"""
import logging
import time
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request

from leadcapture.config.database import LeadStore, SupabaseLeadStore
from leadcapture.config.settings import APP_NAME, VERSION, Settings
from leadcapture.errors import ServerConfigError
from leadcapture.routes import submissions
from leadcapture.services.submission_handler import SubmissionHandler


def create_app(settings: Optional[Settings] = None, store: Optional[LeadStore] = None) -> FastAPI:
    """Build the app; tests pass their own settings and an in-memory store"""
    settings = settings or Settings.from_env()
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    owned_store = None
    if store is None and settings.store_configured:
        owned_store = SupabaseLeadStore(settings.supabase_url, settings.supabase_service_role_key)
        store = owned_store

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan - startup and shutdown events"""
        # Startup
        if owned_store is not None:
            try:
                await owned_store.connect()
            except ServerConfigError:
                print("⚠️ Supabase client could not be created, submissions will be refused")
        else:
            print("⚠️ Supabase credentials missing, submissions will be refused")
        print(f"🚀 {APP_NAME} v{VERSION} started (table: {settings.leads_table})")
        yield
        # Shutdown
        if owned_store is not None:
            await owned_store.close()
        print("👋 Application shutdown")

    app = FastAPI(title=APP_NAME, version=VERSION, debug=settings.debug, lifespan=lifespan)
    app.state.settings = settings
    app.state.submission_handler = SubmissionHandler(settings, store)

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start_time = time.time()
        print(f"\n🌐 {request.method} {request.url.path}")
        response = await call_next(request)
        duration = time.time() - start_time
        print(f"✅ {request.method} {request.url.path} - {response.status_code} ({duration:.2f}s)")
        return response

    app.include_router(submissions.router)

    @app.get("/")
    async def root():
        """Root endpoint"""
        return {
            "app": APP_NAME,
            "version": VERSION,
            "status": "running"
        }

    @app.get("/health")
    async def health_check():
        """Health check endpoint"""
        return {"status": "healthy", "store_configured": settings.store_configured}

    return app


app = create_app()
