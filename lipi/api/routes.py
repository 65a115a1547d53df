from fastapi import APIRouter, Request
from lipi.api.schemas import OptionsRequest, OptionsResponse, TransliterateRequest, TransliterateResponse
from lipi.middleware.metrics import metrics
from lipi.services.transliteration import TransliterationService

router = APIRouter()
service = TransliterationService()


def _rid(request: Request) -> str:
    return getattr(request.state, "request_id", "n/a")


@router.get("/health")
async def health():
    cache_stats = service.cache.stats()
    return {
        "ok": True,
        "cache_size": cache_stats["size"],
        "cache_hits": cache_stats["hits"],
        "cache_misses": cache_stats["misses"],
        **metrics.snapshot(),
    }


@router.post("/transliterate", response_model=TransliterateResponse)
async def transliterate(req: TransliterateRequest, request: Request):
    result = service.dual(req.text, req.enabled, _rid(request))
    return TransliterateResponse(success=True, **result)


@router.get("/transliterate/preview", response_model=TransliterateResponse)
async def transliterate_preview(request: Request, q: str = "", enabled: bool = True):
    result = service.dual(q, enabled, _rid(request))
    return TransliterateResponse(success=True, **result)


@router.post("/transliterate/options", response_model=OptionsResponse)
async def transliterate_options(req: OptionsRequest, request: Request):
    result = service.annotate_options(req.input, req.options, req.enabled, _rid(request))
    return OptionsResponse(success=True, **result)
