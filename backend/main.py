from fastapi import FastAPI, Depends, Body, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from datetime import timedelta
from typing import Any, Dict, List, Optional
import logging

import config
from catalog import list_categories, list_content_types, suggested_file_name
from errors import AuthError, NotFound, register_error_handlers
from schemas import ContentItemRecord, LoginRequest, ProjectRequestRecord, UserSummary
from sessions import SessionRegistry
from storage import Storage, build_storage
from validation import (
    validate_content_item,
    validate_content_update,
    validate_project_request,
    validate_project_request_update,
)

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Creative Catalog API",
    description="Backend API for the creative asset catalog, project requests and admin dashboard",
    version="1.0.0"
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

# Missing headers are reported by require_admin so the body is {message}
security = HTTPBearer(auto_error=False)


# Dependencies
def get_storage(request: Request) -> Storage:
    return request.app.state.storage


def get_sessions(request: Request) -> SessionRegistry:
    return request.app.state.sessions


def get_bearer_token(credentials: Optional[HTTPAuthorizationCredentials] = Depends(security)) -> Optional[str]:
    return credentials.credentials if credentials else None


def require_admin(
    token: Optional[str] = Depends(get_bearer_token),
    sessions: SessionRegistry = Depends(get_sessions),
) -> int:
    if not token:
        raise AuthError("No session token provided")
    user_id = sessions.validate_session(token)
    if user_id is None:
        raise AuthError("Session expired")
    return user_id


# Lifecycle
@app.on_event("startup")
async def startup_event():
    """Build the store and session registry and seed the admin account"""
    logger.info("🚀 Starting application (storage=%s)", config.STORAGE_BACKEND)
    storage = build_storage(config.STORAGE_BACKEND, config.DATABASE_URL)
    storage.seed(
        config.ADMIN_USERNAME,
        config.ADMIN_PASSWORD,
        sample_content=config.SEED_SAMPLE_CONTENT,
    )
    app.state.storage = storage
    app.state.sessions = SessionRegistry(ttl=timedelta(hours=config.SESSION_TTL_HOURS))
    logger.info("✅ Application started")


@app.on_event("shutdown")
async def shutdown_event():
    app.state.sessions.clear()
    if not app.state.storage.persistent:
        app.state.storage.clear()
    logger.info("Application stopped, in-memory state discarded")


# API status endpoint (for API clients)
@app.get("/api/status")
async def api_status():
    return {
        "message": "Creative Catalog API",
        "docs": "/docs",
        "status": "running",
        "version": "1.0.0"
    }


@app.get("/health")
async def health_check():
    return {"status": "healthy", "service": "catalog-api"}


# Content catalog
@app.get("/api/content", response_model=List[ContentItemRecord])
async def list_content(
    category: Optional[str] = None,
    search: Optional[str] = None,
    featured: Optional[str] = None,
    storage: Storage = Depends(get_storage),
):
    # search wins over featured, featured wins over category
    if search:
        return storage.search_content_items(search)
    if featured == "true":
        return storage.get_featured_content_items()
    return storage.get_content_items(category)


@app.get("/api/content/{item_id}", response_model=ContentItemRecord)
async def get_content(item_id: int, storage: Storage = Depends(get_storage)):
    item = storage.get_content_item(item_id)
    if item is None:
        raise NotFound("Content item not found")
    return item


@app.post("/api/content", response_model=ContentItemRecord, status_code=status.HTTP_201_CREATED)
async def create_content(
    payload: Dict[str, Any] = Body(...),
    admin_id: int = Depends(require_admin),
    storage: Storage = Depends(get_storage),
):
    item = storage.create_content_item(validate_content_item(payload))
    logger.info("Content item %d created by admin %d", item.id, admin_id)
    return item


@app.api_route("/api/content/{item_id}", methods=["PUT", "PATCH"], response_model=ContentItemRecord)
async def update_content(
    item_id: int,
    payload: Dict[str, Any] = Body(...),
    admin_id: int = Depends(require_admin),
    storage: Storage = Depends(get_storage),
):
    item = storage.update_content_item(item_id, validate_content_update(payload))
    if item is None:
        raise NotFound("Content item not found")
    logger.info("Content item %d updated by admin %d", item_id, admin_id)
    return item


@app.delete("/api/content/{item_id}")
async def delete_content(
    item_id: int,
    admin_id: int = Depends(require_admin),
    storage: Storage = Depends(get_storage),
):
    if not storage.delete_content_item(item_id):
        raise NotFound("Content item not found")
    logger.info("Content item %d deleted by admin %d", item_id, admin_id)
    return {"message": "Content item deleted successfully"}


@app.post("/api/content/{item_id}/download")
async def download_content(item_id: int, request: Request, storage: Storage = Depends(get_storage)):
    item = storage.get_content_item(item_id)
    if item is None:
        raise NotFound("Content item not found")

    storage.create_download(
        item_id,
        user_agent=request.headers.get("user-agent"),
        ip_address=request.client.host if request.client else None,
    )
    storage.increment_download_count(item_id)

    return {
        "message": "Download recorded successfully",
        "fileUrl": item.file_url,
        "fileName": suggested_file_name(item),
    }


@app.get("/api/categories")
async def get_categories():
    return list_categories()


@app.get("/api/content-types")
async def get_content_types():
    return list_content_types()


# Project requests
@app.post("/api/project-requests", status_code=status.HTTP_201_CREATED)
async def create_project_request(payload: Dict[str, Any] = Body(...), storage: Storage = Depends(get_storage)):
    project_request = storage.create_project_request(validate_project_request(payload))
    logger.info("Project request %d submitted", project_request.id)
    return {
        "message": "Project request submitted successfully",
        "id": project_request.id
    }


@app.get("/api/project-requests", response_model=List[ProjectRequestRecord])
async def get_project_requests(
    admin_id: int = Depends(require_admin),
    storage: Storage = Depends(get_storage),
):
    return storage.get_project_requests()


@app.get("/api/project-requests/{request_id}", response_model=ProjectRequestRecord)
async def get_project_request(
    request_id: int,
    admin_id: int = Depends(require_admin),
    storage: Storage = Depends(get_storage),
):
    project_request = storage.get_project_request(request_id)
    if project_request is None:
        raise NotFound("Project request not found")
    return project_request


@app.patch("/api/project-requests/{request_id}", response_model=ProjectRequestRecord)
async def update_project_request(
    request_id: int,
    payload: Dict[str, Any] = Body(...),
    admin_id: int = Depends(require_admin),
    storage: Storage = Depends(get_storage),
):
    project_request = storage.update_project_request(request_id, validate_project_request_update(payload))
    if project_request is None:
        raise NotFound("Project request not found")
    logger.info("Project request %d updated by admin %d", request_id, admin_id)
    return project_request


# Admin authentication
@app.post("/api/admin/login")
async def login(
    login_data: LoginRequest,
    storage: Storage = Depends(get_storage),
    sessions: SessionRegistry = Depends(get_sessions),
):
    user = storage.authenticate_user(login_data.username, login_data.password)
    if user is None or not user.is_admin:
        logger.warning("Rejected admin login for %s", login_data.username)
        raise AuthError("Invalid credentials")

    token = sessions.create_session(user.id)
    logger.info("Admin %s logged in", user.username)
    return {
        "message": "Login successful",
        "token": token,
        "user": UserSummary(id=user.id, username=user.username, is_admin=user.is_admin),
    }


@app.post("/api/admin/logout")
async def logout(
    token: Optional[str] = Depends(get_bearer_token),
    sessions: SessionRegistry = Depends(get_sessions),
):
    sessions.destroy_session(token)
    return {"message": "Logout successful"}


# Stats
@app.get("/api/stats/downloads")
async def download_stats(
    admin_id: int = Depends(require_admin),
    storage: Storage = Depends(get_storage),
):
    return [
        {
            "id": item.id,
            "title": item.title,
            "category": item.category,
            "downloadCount": item.download_count or 0,
            "recordedDownloads": storage.get_download_stats(item.id),
        }
        for item in storage.get_content_items()
    ]


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=config.PORT)
