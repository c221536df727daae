from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from bloglist.api.error_handlers import register_error_handlers
from bloglist.core.config import settings
from bloglist.db.init_db import create_all_tables
from bloglist.middleware.auth_logging import AuthLoggingMiddleware
from bloglist.middleware.request_logging import RequestLoggingMiddleware
from bloglist.modules.auth.api.router import router as auth_router
from bloglist.modules.authors.api.router import router as authors_router
from bloglist.modules.posts.api.router import router as posts_router
from bloglist.modules.posts.services.mutation import AuthorLocks
from bloglist.modules.stats.api.router import router as stats_router

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger("bloglist")


def create_app() -> FastAPI:
    app = FastAPI(
        title=settings.PROJECT_NAME,
        openapi_url=f"{settings.API_PREFIX}/openapi.json",
        debug=settings.DEBUG,
        description="Posts and authors with token authentication",
        version=settings.VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Serializes post_ids updates per author for this application instance
    app.state.author_locks = AuthorLocks()

    @app.on_event("startup")
    def startup_event():
        logger.info(f"Starting server in {settings.ENVIRONMENT} mode")
        create_all_tables()

    register_error_handlers(app)

    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(AuthLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(authors_router, prefix=f"{settings.API_PREFIX}/authors", tags=["authors"])
    app.include_router(auth_router, prefix=f"{settings.API_PREFIX}/login", tags=["authentication"])
    app.include_router(posts_router, prefix=f"{settings.API_PREFIX}/posts", tags=["posts"])
    app.include_router(stats_router, prefix=f"{settings.API_PREFIX}/stats", tags=["stats"])

    @app.get("/")
    def root():
        return {
            "message": f"Welcome to {settings.PROJECT_NAME}",
            "version": settings.VERSION,
            "environment": settings.ENVIRONMENT,
            "documentation": "/docs" if settings.DEBUG else None,
        }

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("bloglist.main:app", host="0.0.0.0", port=8000, reload=True)
