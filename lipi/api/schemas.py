from pydantic import BaseModel, Field
from typing import Annotated, List, Optional

from lipi.core.config import settings


class TransliterateRequest(BaseModel):
    text: str = Field(..., max_length=settings.MAX_TEXT_LEN)
    enabled: bool = True


class DualName(BaseModel):
    en: str = Field(..., description="Name as typed")
    hi: Optional[str] = Field(None, description="Devanagari rendering, null when display is off")


class TransliterateResponse(BaseModel):
    success: bool = True
    en: str
    hi: Optional[str] = None


class OptionsRequest(BaseModel):
    input: str = Field("", max_length=settings.MAX_TEXT_LEN)
    options: List[Annotated[str, Field(max_length=settings.MAX_TEXT_LEN)]] = Field(default_factory=list, max_length=settings.MAX_OPTIONS)
    enabled: bool = True


class OptionsResponse(BaseModel):
    success: bool = True
    preview: Optional[str] = None
    matches: List[DualName]
    add_new: Optional[DualName] = None
