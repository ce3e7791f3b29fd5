from typing import Literal

from pydantic import BaseModel

ImageKind = Literal["animal", "plant", "medicinal", "history"]
TextAnalysisType = Literal["sentiment", "language", "keywords", "factargument"]


class AnalysisResult(BaseModel):
    analysis: str
    model: str
    kind: str  # image kind or text analysis type


class ImageAnalysisRequest(BaseModel):
    image_base64: str
    kind: ImageKind
    food: str | None = None  # required when kind == "animal"
    mime_type: str = "image/jpeg"


class TextAnalysisRequest(BaseModel):
    text: str
    analysis_type: TextAnalysisType = "sentiment"


class TextSearchRequest(BaseModel):
    query: str | None = None
    prompt: str | None = None


class TextSearchResponse(BaseModel):
    result: str
