from fastapi import FastAPI, APIRouter, Depends, Query, Request
from fastapi.responses import JSONResponse
from typing import Dict, List
from loguru import logger

from doc_analytics.application.settings import get_settings, Settings
from doc_analytics.application.log_setup import setup_logging
from doc_analytics.application.errors import DocumentServiceError
from doc_analytics.application.services.document_service import DocumentService
from doc_analytics.application.api.schemas import (
    AggregateStatisticsOut,
    CreateStatus,
    DocumentIn,
    DocumentOut,
    ErrorBody,
    StatisticsOut,
)

# Configure logging once
setup_logging()

app = FastAPI(title="Document Analytics (storage + text statistics)")

CREATE_STATUS = "Document saved successfully!"

# --- Dependencies ---
def settings_dep() -> Settings:
    return get_settings()

# One service (and so one store) for the app lifetime
_document_service: DocumentService | None = None
def document_service_dep(settings: Settings = Depends(settings_dep)) -> DocumentService:
    global _document_service
    # Lazy initialization; build on first request
    if _document_service is None:
        _document_service = DocumentService.build(settings)
    return _document_service


# --- Errors ---
@app.exception_handler(DocumentServiceError)
async def document_error_handler(request: Request, exc: DocumentServiceError) -> JSONResponse:
    logger.warning("{} {} -> {} {}", request.method, request.url.path, exc.code, exc.message)
    return JSONResponse(status_code=exc.code, content=exc.to_dict())


# --- Meta ---
@app.get("/", tags=["meta"])
def root(
    settings: Settings = Depends(settings_dep),
    svc: DocumentService = Depends(document_service_dep),
):
    return {
        "ok": True,
        "app_name": settings.app_name,
        "environment": settings.app_env,
        "debug": settings.debug,
        "store": svc.backend,
    }


# --- Documents ---
# static paths (/statistics, /search) are registered before /{id}
router = APIRouter(prefix="/api/documents", tags=["documents"])
errors = {400: {"model": ErrorBody}, 404: {"model": ErrorBody}}


@router.post("/", response_model=CreateStatus, responses=errors)
def create_document(body: DocumentIn, svc: DocumentService = Depends(document_service_dep)):
    svc.create(body.id, body.text)
    return {"createStatus": CREATE_STATUS}


@router.get("/statistics", response_model=AggregateStatisticsOut, responses=errors)
def all_statistics(svc: DocumentService = Depends(document_service_dep)):
    return svc.get_all_statistics()


@router.get("/search", response_model=List[int], responses=errors)
def search(
    word: str = Query(..., description="Exact word to look for"),
    svc: DocumentService = Depends(document_service_dep),
):
    return svc.search_by_word(word)


@router.get("/{doc_id}", response_model=DocumentOut, responses=errors)
def get_document(doc_id: int, svc: DocumentService = Depends(document_service_dep)):
    doc = svc.get(doc_id)
    return {"id": doc.id, "text": doc.text}


@router.get("/{doc_id}/normalized", response_model=DocumentOut, responses=errors)
def get_normalized(doc_id: int, svc: DocumentService = Depends(document_service_dep)):
    doc = svc.get_normalized(doc_id)
    return {"id": doc.id, "text": doc.text}


@router.get("/{doc_id}/statistics", response_model=StatisticsOut, responses=errors)
def document_statistics(doc_id: int, svc: DocumentService = Depends(document_service_dep)):
    return svc.get_statistics(doc_id).as_dict()


# word -> count; JSON object order is the ranking
@router.get("/{doc_id}/top-words", response_model=Dict[str, int], responses=errors)
def top_words(doc_id: int, svc: DocumentService = Depends(document_service_dep)):
    return dict(svc.get_top_words(doc_id))


@router.get("/{doc_id}/bigrams", response_model=Dict[str, int], responses=errors)
def bigrams(doc_id: int, svc: DocumentService = Depends(document_service_dep)):
    return dict(svc.get_bigrams(doc_id))


app.include_router(router)
