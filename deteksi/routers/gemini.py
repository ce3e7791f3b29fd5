from fastapi import APIRouter

from deteksi.config import get_settings
from deteksi.models.gemini import AnalysisResult, ImageAnalysisRequest, TextAnalysisRequest
from deteksi.prompts import image_prompt
from deteksi.services import gemini as gemini_service

router = APIRouter(prefix="/api/analyze", tags=["analyze"])


@router.post("/image")
def analyze_image(req: ImageAnalysisRequest) -> AnalysisResult:
    prompt = image_prompt(req.kind, req.food)
    analysis = gemini_service.analyze_image(req.image_base64, prompt, req.mime_type)
    return AnalysisResult(analysis=analysis, model=get_settings().gemini_model, kind=req.kind)


@router.post("/text")
def analyze_text(req: TextAnalysisRequest) -> AnalysisResult:
    analysis = gemini_service.analyze_text(req.text, req.analysis_type)
    return AnalysisResult(analysis=analysis, model=get_settings().gemini_model, kind=req.analysis_type)
