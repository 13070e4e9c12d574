"""
HTTP routes for the hub API.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from hub.config import get_settings
from hub.db import (
    DbClient,
    DuplicateUserError,
    OwnerNotFoundError,
    ScriptRecord,
    UserRecord,
)
from hub.dependencies import get_db_client, get_stats_sampler
from hub.generator import generate_script
from hub.monitor import StatsSampler
from hub.schemas import (
    AuthResponse,
    CategoryResponse,
    GeneratedScriptResponse,
    GenerateScriptRequest,
    LoginRequest,
    NewsArticleCreate,
    NewsArticleResponse,
    NewsArticleUpdate,
    ScriptCreate,
    ScriptResponse,
    ScriptUpdate,
    StatusResponse,
    SystemReadingResponse,
    SystemStatsCreate,
    SystemStatsResponse,
    UserCreate,
    UserResponse,
)
from hub.security import create_access_token, decode_access_token
from shared.types import SCRIPT_CATEGORY_NAMES, ScriptCategory

logger = logging.getLogger(__name__)

router = APIRouter()

_bearer = HTTPBearer(auto_error=False)


def get_current_user_optional(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(_bearer),
    db: DbClient = Depends(get_db_client),
) -> Optional[UserRecord]:
    if credentials is None:
        return None
    user_id = decode_access_token(credentials.credentials)
    if not user_id:
        return None
    return db.get_user(user_id)


def get_current_user(
    user: Optional[UserRecord] = Depends(get_current_user_optional),
) -> UserRecord:
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user


def _auth_response(user: UserRecord) -> AuthResponse:
    return AuthResponse(
        access_token=create_access_token(user.id),
        user=UserResponse.model_validate(user.as_dict()),
    )


def _visible(script: ScriptRecord, user: Optional[UserRecord]) -> bool:
    if script.is_public:
        return True
    return user is not None and script.user_id == user.id


@router.get("/health", response_model=StatusResponse)
def health() -> StatusResponse:
    return StatusResponse(status="ok")


# Auth


@router.post(
    "/auth/register",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
)
def register(
    payload: UserCreate, db: DbClient = Depends(get_db_client)
) -> AuthResponse:
    try:
        user = db.create_user(payload)
    except DuplicateUserError as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc
    logger.info("Registered user %s", user.username)
    return _auth_response(user)


@router.post("/auth/login", response_model=AuthResponse)
def login(payload: LoginRequest, db: DbClient = Depends(get_db_client)) -> AuthResponse:
    user = db.get_user_by_email(payload.email)
    if not user or not db.verify_password(user, payload.password):
        raise HTTPException(status_code=401, detail="Invalid email or password")
    return _auth_response(user)


@router.post("/auth/logout", response_model=StatusResponse)
def logout() -> StatusResponse:
    # Tokens are stateless; the client discards its copy.
    return StatusResponse(status="ok")


@router.get("/auth/me", response_model=UserResponse)
def me(user: UserRecord = Depends(get_current_user)) -> UserResponse:
    return UserResponse.model_validate(user.as_dict())


# Scripts


@router.get("/scripts", response_model=List[ScriptResponse])
def list_scripts(
    category: Optional[str] = Query(default=None),
    search: Optional[str] = Query(default=None),
    db: DbClient = Depends(get_db_client),
    user: Optional[UserRecord] = Depends(get_current_user_optional),
) -> List[ScriptResponse]:
    if search:
        scripts = db.search_scripts(search)
        if category:
            scripts = [s for s in scripts if s.category == category]
    elif category:
        scripts = db.list_scripts_by_category(category)
    else:
        scripts = db.list_scripts()
    return [
        ScriptResponse.model_validate(s.as_dict()) for s in scripts if _visible(s, user)
    ]


@router.get("/scripts/categories", response_model=List[CategoryResponse])
def list_categories() -> List[CategoryResponse]:
    return [
        CategoryResponse(id=category.value, name=SCRIPT_CATEGORY_NAMES[category])
        for category in ScriptCategory
    ]


@router.post("/scripts/generate", response_model=GeneratedScriptResponse)
def generate(
    payload: GenerateScriptRequest,
    db: DbClient = Depends(get_db_client),
    user: Optional[UserRecord] = Depends(get_current_user_optional),
) -> GeneratedScriptResponse:
    settings = get_settings()
    result = generate_script(
        payload.prompt,
        payload.template,
        api_key=settings.gemini_api_key,
        model=settings.gemini_model,
    )
    saved = None
    if payload.save and user is not None:
        category = (
            payload.template
            if payload.template in {c.value for c in ScriptCategory}
            else ScriptCategory.UTILITY
        )
        title = " ".join(payload.prompt.split())
        record = db.create_script(
            ScriptCreate(
                name=f"AI: {title[:60]}",
                description=title[:500],
                category=category,
                code=result.code,
                author=user.username,
                user_id=user.id,
                is_public=False,
            )
        )
        saved = ScriptResponse.model_validate(record.as_dict())
    return GeneratedScriptResponse(
        generated_code=result.code, source=result.source.value, script=saved
    )


def _get_visible_script(
    db: DbClient, script_id: str, user: Optional[UserRecord]
) -> ScriptRecord:
    script = db.get_script(script_id)
    if not script or not _visible(script, user):
        raise HTTPException(status_code=404, detail="Script not found")
    return script


@router.get("/scripts/{script_id}", response_model=ScriptResponse)
def get_script(
    script_id: str,
    db: DbClient = Depends(get_db_client),
    user: Optional[UserRecord] = Depends(get_current_user_optional),
) -> ScriptResponse:
    script = _get_visible_script(db, script_id, user)
    return ScriptResponse.model_validate(script.as_dict())


@router.post(
    "/scripts",
    response_model=ScriptResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_script(
    payload: ScriptCreate,
    db: DbClient = Depends(get_db_client),
    user: UserRecord = Depends(get_current_user),
) -> ScriptResponse:
    if payload.user_id is None:
        payload = payload.model_copy(update={"user_id": user.id})
    try:
        script = db.create_script(payload)
    except OwnerNotFoundError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return ScriptResponse.model_validate(script.as_dict())


@router.patch("/scripts/{script_id}", response_model=ScriptResponse)
def update_script(
    script_id: str,
    patch: ScriptUpdate,
    db: DbClient = Depends(get_db_client),
    user: UserRecord = Depends(get_current_user),
) -> ScriptResponse:
    _get_visible_script(db, script_id, user)
    try:
        script = db.update_script(script_id, patch)
    except OwnerNotFoundError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    if not script:
        raise HTTPException(status_code=404, detail="Script not found")
    return ScriptResponse.model_validate(script.as_dict())


@router.delete("/scripts/{script_id}", response_model=StatusResponse)
def delete_script(
    script_id: str,
    db: DbClient = Depends(get_db_client),
    user: UserRecord = Depends(get_current_user),
) -> StatusResponse:
    _get_visible_script(db, script_id, user)
    if not db.delete_script(script_id):
        raise HTTPException(status_code=404, detail="Script not found")
    return StatusResponse(status="ok")


@router.post("/scripts/{script_id}/execute", response_model=ScriptResponse)
def execute_script(
    script_id: str,
    db: DbClient = Depends(get_db_client),
    user: Optional[UserRecord] = Depends(get_current_user_optional),
) -> ScriptResponse:
    _get_visible_script(db, script_id, user)
    db.increment_execution(script_id)
    script = db.get_script(script_id)
    if not script:
        raise HTTPException(status_code=404, detail="Script not found")
    return ScriptResponse.model_validate(script.as_dict())


@router.post("/scripts/{script_id}/favorite", response_model=ScriptResponse)
def favorite_script(
    script_id: str,
    db: DbClient = Depends(get_db_client),
    user: Optional[UserRecord] = Depends(get_current_user_optional),
) -> ScriptResponse:
    _get_visible_script(db, script_id, user)
    db.toggle_favorite(script_id)
    script = db.get_script(script_id)
    if not script:
        raise HTTPException(status_code=404, detail="Script not found")
    return ScriptResponse.model_validate(script.as_dict())


# News


@router.get("/news", response_model=List[NewsArticleResponse])
def list_news(
    category: Optional[str] = Query(default=None),
    db: DbClient = Depends(get_db_client),
) -> List[NewsArticleResponse]:
    articles = db.list_news_by_category(category) if category else db.list_news()
    return [NewsArticleResponse.model_validate(a.as_dict()) for a in articles]


@router.get("/news/{article_id}", response_model=NewsArticleResponse)
def get_news_article(
    article_id: str, db: DbClient = Depends(get_db_client)
) -> NewsArticleResponse:
    article = db.get_news_article(article_id)
    if not article:
        raise HTTPException(status_code=404, detail="Article not found")
    return NewsArticleResponse.model_validate(article.as_dict())


@router.post(
    "/news",
    response_model=NewsArticleResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_news_article(
    payload: NewsArticleCreate,
    db: DbClient = Depends(get_db_client),
    user: UserRecord = Depends(get_current_user),
) -> NewsArticleResponse:
    article = db.create_news_article(payload)
    return NewsArticleResponse.model_validate(article.as_dict())


@router.patch("/news/{article_id}", response_model=NewsArticleResponse)
def update_news_article(
    article_id: str,
    patch: NewsArticleUpdate,
    db: DbClient = Depends(get_db_client),
    user: UserRecord = Depends(get_current_user),
) -> NewsArticleResponse:
    article = db.update_news_article(article_id, patch)
    if not article:
        raise HTTPException(status_code=404, detail="Article not found")
    return NewsArticleResponse.model_validate(article.as_dict())


@router.delete("/news/{article_id}", response_model=StatusResponse)
def delete_news_article(
    article_id: str,
    db: DbClient = Depends(get_db_client),
    user: UserRecord = Depends(get_current_user),
) -> StatusResponse:
    if not db.delete_news_article(article_id):
        raise HTTPException(status_code=404, detail="Article not found")
    return StatusResponse(status="ok")


# System stats


@router.get("/system-stats", response_model=SystemStatsResponse)
def current_stats(db: DbClient = Depends(get_db_client)) -> SystemStatsResponse:
    stats = db.get_current_stats()
    if not stats:
        raise HTTPException(status_code=404, detail="No stats recorded")
    return SystemStatsResponse.model_validate(stats.as_dict())


@router.get("/system-stats/history", response_model=List[SystemStatsResponse])
def stats_history(db: DbClient = Depends(get_db_client)) -> List[SystemStatsResponse]:
    return [SystemStatsResponse.model_validate(s.as_dict()) for s in db.get_stats_history()]


@router.post(
    "/system-stats",
    response_model=SystemStatsResponse,
    status_code=status.HTTP_201_CREATED,
)
def record_stats(
    payload: SystemStatsCreate, db: DbClient = Depends(get_db_client)
) -> SystemStatsResponse:
    stats = db.record_stats(payload)
    return SystemStatsResponse.model_validate(stats.as_dict())


@router.get("/system-monitor", response_model=SystemReadingResponse)
def live_reading(
    sampler: StatsSampler = Depends(get_stats_sampler),
) -> SystemReadingResponse:
    reading = sampler.latest() or sampler.read()
    return SystemReadingResponse.model_validate(reading.as_dict())


@router.get("/system-monitor/history", response_model=List[SystemReadingResponse])
def reading_history(
    sampler: StatsSampler = Depends(get_stats_sampler),
) -> List[SystemReadingResponse]:
    return [SystemReadingResponse.model_validate(r.as_dict()) for r in sampler.history()]
