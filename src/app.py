# ============================================================
# Searchable Dropdown FastAPI App
# ------------------------------------------------------------
# This app wires everything together:
#   - Full page with the htmx search box (GET /)
#   - Results fragment for search-as-you-type (GET /search)
#   - Record source injected as a dependency
# ============================================================

import logging

from fastapi import Depends, FastAPI, HTTPException, Query, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

# --- Local imports ---
from src.settings import settings
from src.search import RecordSource, default_source, filter_records, query_length

# ------------------------------------------------------------
# 📝 Logging
# ------------------------------------------------------------
_root_logger = logging.getLogger("src")
if not _root_logger.handlers:
    h = logging.StreamHandler()
    h.setFormatter(logging.Formatter("%(asctime)s %(levelname)s: %(message)s"))
    _root_logger.addHandler(h)
_root_logger.setLevel(settings.LOG_LEVEL)

logger = logging.getLogger(__name__)

# ------------------------------------------------------------
# 🚀 FastAPI init
# ------------------------------------------------------------
app = FastAPI(title=f"{settings.APP_NAME} API", version="0.1")
templates = Jinja2Templates(directory=settings.TEMPLATES_DIR)

FRAGMENT_TEMPLATE = "partials/dropdown-results.html"
PAGE_TEMPLATE = "index.html"


# ------------------------------------------------------------
# 📦 Dependencies
# ------------------------------------------------------------
def get_record_source() -> RecordSource:
    return default_source(settings.RECORDS_PATH)


# ------------------------------------------------------------
# 🏠 Full page
# ------------------------------------------------------------
@app.get("/", response_class=HTMLResponse)
def index(request: Request):
    try:
        return templates.TemplateResponse(request, PAGE_TEMPLATE, {"app_name": settings.app_name})
    except Exception as e:
        logger.exception("Failed to render %s", PAGE_TEMPLATE)
        raise HTTPException(status_code=500, detail=str(e))


# ------------------------------------------------------------
# 🔎 Results fragment
# ------------------------------------------------------------
@app.get("/search", response_class=HTMLResponse)
def search(
    request: Request,
    q: str = Query("", description="Search query (name or contact)"),
    source: RecordSource = Depends(get_record_source),
):
    try:
        result = filter_records(q, source.list_all_records(), min_length=settings.MIN_QUERY_LENGTH)
        logger.debug(
            "search q_len=%d too_short=%s matches=%d",
            query_length(q), result.query_too_short, len(result.matches),
        )
        context = result.to_context()
        context["min_length"] = settings.MIN_QUERY_LENGTH
        return templates.TemplateResponse(request, FRAGMENT_TEMPLATE, context)
    except Exception as e:
        logger.exception("Search failed for q=%r", q)
        raise HTTPException(status_code=500, detail=str(e))


# ------------------------------------------------------------
# 🧭 Health checks
# ------------------------------------------------------------
@app.get("/healthz")
def healthz():
    return {
        "ok": True,
        "env": settings.ENV,
        "debug": settings.DEBUG,
        "app": settings.APP_NAME,
    }


@app.get("/health")
def health():
    return {"status": "ok", "env": settings.ENV}
