import logging
from typing import Iterable, List, Optional

from lipi.core.cache import LRUCache, make_cache_key
from lipi.core.config import settings
from lipi.services.devanagari import transliterate

DEBUG = False


def dual_name(en: str, hi: Optional[str]) -> dict:
    return {"en": en, "hi": hi}


class TransliterationService:
    """
    Bilingual name previews for the ledger UI.

    The caller owns the "bilingual display enabled" toggle and passes it in
    as ``enabled``; nothing is rendered while it is off.
    """

    def __init__(self):
        self.cache = LRUCache(max_size=settings.CACHE_MAX_SIZE, default_ttl=settings.CACHE_TTL_SECONDS)

    def render(self, text: str) -> str:
        return self.cache.get_or_set(make_cache_key("hi", text), lambda: transliterate(text))

    def preview(self, text: str, enabled: bool, request_id: str = "n/a") -> Optional[str]:
        """Devanagari rendering of ``text``, or None when display is off or the text is blank."""
        if not enabled or not (text or "").strip():
            if DEBUG:
                logging.info("preview_skipped request_id=%s enabled=%s", request_id, enabled)
            return None
        # typed text is rendered untrimmed; surrounding spaces pass through
        out = self.render(text)
        logging.info("preview_done request_id=%s in_len=%d out_len=%d", request_id, len(text), len(out))
        return out

    def dual(self, text: str, enabled: bool, request_id: str = "n/a") -> dict:
        return dual_name(text, self.preview(text, enabled, request_id))

    def annotate_options(
        self, typed: str, options: Iterable[str], enabled: bool, request_id: str = "n/a"
    ) -> dict:
        """
        Combobox view of ``options`` for the text typed so far.

        Options are filtered by case-insensitive substring. ``add_new`` offers
        the trimmed input as a new entry unless an option already equals it.
        """
        typed = typed or ""
        needle = typed.lower()
        trimmed = typed.strip()
        options = list(options)

        matches: List[dict] = []
        for opt in options:
            if needle not in opt.lower():
                continue
            matches.append(dual_name(opt, self.render(opt) if enabled else None))

        preview = self.preview(typed, enabled, request_id)
        add_new = None
        if trimmed and not any(o.lower() == trimmed.lower() for o in options):
            add_new = dual_name(trimmed, preview)

        logging.info(
            "options_annotated request_id=%s options=%d matches=%d add_new=%s",
            request_id,
            len(options),
            len(matches),
            add_new is not None,
        )
        return {"preview": preview, "matches": matches, "add_new": add_new}
