import logging
from typing import Optional

from fastapi import FastAPI, HTTPException, Query, Request
from fastapi.responses import JSONResponse

from letterboxed.settings import settings

logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)
logger = logging.getLogger("letterboxed")

# Populated at startup
_trie = None


def _load_trie():
    global _trie
    from letterboxed.trie import load_trie
    logger.info("Loading dictionary from %s (min_length=%d)", settings.DICTIONARY_PATH, settings.MIN_WORD_LENGTH)
    _trie = load_trie(str(settings.DICTIONARY_PATH), settings.MIN_WORD_LENGTH)
    logger.info("Trie loaded with %d words", len(_trie))


def create_app() -> FastAPI:
    from contextlib import asynccontextmanager

    @asynccontextmanager
    async def lifespan(application: FastAPI):
        _load_trie()
        yield

    application = FastAPI(title="Letter Boxed Solver", lifespan=lifespan)

    @application.get("/health")
    async def health():
        return {"status": "ok", "trie_loaded": _trie is not None}

    @application.get("/solve")
    def solve(top: Optional[int] = Query(None, ge=1)):
        from letterboxed.solver import SearchOverflow, solve as solve_box

        if _trie is None:
            raise HTTPException(503, "Dictionary not loaded")

        sides = settings.box_sides()
        top = top or settings.TOP_SOLUTIONS
        logger.info("GET /solve box=%s top=%d", settings.BOX_LAYOUT, top)

        try:
            result = solve_box(sides, _trie, max_chain_length=settings.MAX_CHAIN_LENGTH, top=top)
        except SearchOverflow as e:
            logger.error("Search aborted: %s", e)
            raise HTTPException(500, str(e))

        logger.info("Returning %d of %d solutions", len(result.solutions), result.solution_count)
        return JSONResponse({"box": sides, **result.to_dict()})

    @application.get("/api/settings")
    async def api_get_settings():
        from letterboxed.settings import get_editable_settings, EDITABLE_FIELDS
        values = get_editable_settings(settings)
        field_types = {k: v.__name__ for k, v in EDITABLE_FIELDS.items()}
        return JSONResponse({"settings": values, "field_types": field_types})

    @application.post("/api/settings")
    async def api_post_settings(request: Request):
        from letterboxed.settings import update_settings, get_editable_settings
        body = await request.json()
        min_length = settings.MIN_WORD_LENGTH
        errors = update_settings(settings, **body)
        if _trie is not None and settings.MIN_WORD_LENGTH != min_length:
            # Short entries stay in the trie, only the word check changes
            _trie.min_length = settings.MIN_WORD_LENGTH
        logging.getLogger().setLevel(logging.DEBUG if settings.DEBUG else logging.INFO)
        if errors:
            return JSONResponse({"updated": get_editable_settings(settings), "errors": errors}, status_code=400)
        logger.info("Settings updated: %s", body)
        return JSONResponse({"updated": get_editable_settings(settings)})

    return application


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=settings.PORT)
