"""Server-rendered detection pages: form in, Gemini or REST Countries text out."""

import logging
from dataclasses import dataclass
from pathlib import Path

from fastapi import APIRouter, File, Form, Request, UploadFile
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from deteksi.exceptions import AuthenticationError, IntegrationError, InvalidInputError
from deteksi.prompts import (
    TEXT_ANALYSIS_TYPES,
    history_fallback_prompt,
    history_text_prompt,
    image_prompt,
)
from deteksi.services import countries as countries_service
from deteksi.services import gemini as gemini_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["pages"])

templates_dir = Path(__file__).resolve().parent.parent / "templates"
templates = Jinja2Templates(directory=str(templates_dir))

# Everything a page handler can turn into a message instead of a 500.
DISPLAYABLE_ERRORS = (InvalidInputError, IntegrationError, AuthenticationError)

HISTORY_NOT_FOUND_MESSAGE = (
    "Maaf, tidak dapat menemukan informasi tentang tokoh atau peristiwa tersebut. "
    "Pastikan ejaan sudah benar."
)


@dataclass(frozen=True)
class ImagePage:
    path: str
    kind: str
    icon: str
    title: str
    description: str
    missing_image_message: str
    theme: str
    needs_food: bool = False


IMAGE_PAGES: dict[str, ImagePage] = {
    "animal": ImagePage(
        path="/deteksi-hewan",
        kind="animal",
        icon="🐾",
        title="Deteksi Hewan",
        description="Upload foto hewan dan jenis makanannya untuk mengetahui apakah makanan tersebut cocok.",
        missing_image_message="Silakan upload gambar dan masukkan jenis makanan!",
        theme="green",
        needs_food=True,
    ),
    "plant": ImagePage(
        path="/deteksi-tumbuhan",
        kind="plant",
        icon="🌱",
        title="Deteksi Tumbuhan",
        description="Kenali jenis tumbuhan, ciri khas, kegunaan, dan cara merawatnya.",
        missing_image_message="Silakan upload gambar tumbuhan terlebih dahulu!",
        theme="green",
    ),
    "medicinal": ImagePage(
        path="/deteksi-obat",
        kind="medicinal",
        icon="🌿",
        title="Deteksi Tumbuhan Obat",
        description="Cek apakah tumbuhan berkhasiat obat beserta cara pakai dan keamanannya.",
        missing_image_message="Silakan upload gambar tumbuhan terlebih dahulu!",
        theme="teal",
    ),
    "history": ImagePage(
        path="/deteksi-sejarah",
        kind="history",
        icon="🏛️",
        title="Deteksi Sejarah",
        description="Identifikasi tokoh sejarah, pahlawan, ilmuwan, atau peristiwa bersejarah dari gambar atau nama.",
        missing_image_message="Silakan upload gambar terlebih dahulu!",
        theme="amber",
    ),
}

HOME_LINKS = [
    *((page.path, page.icon, page.title, page.description) for page in IMAGE_PAGES.values()),
    ("/deteksi-teks", "📝", "Deteksi Teks", "Analisis sentimen, bahasa, kata kunci, atau fakta dan argumen dari teks."),
    ("/deteksi-negara", "🌍", "Pencarian Negara", "Cari informasi lengkap tentang negara-negara di dunia."),
]


def _read_upload(image: UploadFile | None) -> tuple[bytes, str]:
    if image is None or not image.filename:
        return b"", ""
    return image.file.read(), image.content_type or "image/jpeg"


def _render_image_page(request: Request, page: ImagePage, **context) -> HTMLResponse:
    return templates.TemplateResponse(
        request,
        "image_page.html",
        {"page": page, "food": "", "query": "", "result": None, "error": None, "preview": None, **context},
    )


def _detect_image(request: Request, page: ImagePage, image: UploadFile | None, food: str) -> HTMLResponse:
    data, mime_type = _read_upload(image)
    if not data or (page.needs_food and not food.strip()):
        return _render_image_page(request, page, food=food, error=page.missing_image_message)

    image_base64 = gemini_service.encode_image(data)
    preview = f"data:{mime_type};base64,{image_base64}"
    try:
        prompt = image_prompt(page.kind, food)
        result = gemini_service.analyze_image(image_base64, prompt, mime_type)
    except DISPLAYABLE_ERRORS as exc:
        logger.warning("%s detection failed: %s", page.kind, exc)
        return _render_image_page(request, page, food=food, preview=preview, error=str(exc))
    return _render_image_page(request, page, food=food, preview=preview, result=result)


@router.get("/", response_class=HTMLResponse)
def home(request: Request) -> HTMLResponse:
    return templates.TemplateResponse(request, "index.html", {"links": HOME_LINKS})


@router.get("/deteksi-hewan", response_class=HTMLResponse)
def animal_page(request: Request) -> HTMLResponse:
    return _render_image_page(request, IMAGE_PAGES["animal"])


@router.post("/deteksi-hewan", response_class=HTMLResponse)
def animal_detect(
    request: Request,
    image: UploadFile | None = File(None),
    food: str = Form(""),
) -> HTMLResponse:
    return _detect_image(request, IMAGE_PAGES["animal"], image, food)


@router.get("/deteksi-tumbuhan", response_class=HTMLResponse)
def plant_page(request: Request) -> HTMLResponse:
    return _render_image_page(request, IMAGE_PAGES["plant"])


@router.post("/deteksi-tumbuhan", response_class=HTMLResponse)
def plant_detect(request: Request, image: UploadFile | None = File(None)) -> HTMLResponse:
    return _detect_image(request, IMAGE_PAGES["plant"], image, "")


@router.get("/deteksi-obat", response_class=HTMLResponse)
def medicinal_page(request: Request) -> HTMLResponse:
    return _render_image_page(request, IMAGE_PAGES["medicinal"])


@router.post("/deteksi-obat", response_class=HTMLResponse)
def medicinal_detect(request: Request, image: UploadFile | None = File(None)) -> HTMLResponse:
    return _detect_image(request, IMAGE_PAGES["medicinal"], image, "")


@router.get("/deteksi-sejarah", response_class=HTMLResponse)
def history_page(request: Request) -> HTMLResponse:
    return _render_image_page(request, IMAGE_PAGES["history"])


@router.post("/deteksi-sejarah", response_class=HTMLResponse)
def history_detect(request: Request, image: UploadFile | None = File(None)) -> HTMLResponse:
    return _detect_image(request, IMAGE_PAGES["history"], image, "")


@router.post("/deteksi-sejarah/cari", response_class=HTMLResponse)
def history_search(request: Request, query: str = Form("")) -> HTMLResponse:
    """Look up a historical figure or event by name, falling back to keyword analysis."""
    page = IMAGE_PAGES["history"]
    if not query.strip():
        return _render_image_page(
            request, page, query=query, error="Silakan masukkan nama tokoh atau peristiwa sejarah!"
        )
    try:
        result = gemini_service.generate_text(history_text_prompt(query.strip()))
    except DISPLAYABLE_ERRORS as exc:
        logger.warning("History search failed, falling back to keyword analysis: %s", exc)
        try:
            result = gemini_service.analyze_text(history_fallback_prompt(query.strip()), "keywords")
        except DISPLAYABLE_ERRORS as fallback_exc:
            logger.error("History fallback failed: %s", fallback_exc)
            return _render_image_page(request, page, query=query, error=HISTORY_NOT_FOUND_MESSAGE)
    return _render_image_page(request, page, query=query, result=result)


def _render_text_page(request: Request, **context) -> HTMLResponse:
    return templates.TemplateResponse(
        request,
        "text_page.html",
        {
            "analysis_types": TEXT_ANALYSIS_TYPES,
            "text": "",
            "analysis_type": "sentiment",
            "result": None,
            "error": None,
            **context,
        },
    )


@router.get("/deteksi-teks", response_class=HTMLResponse)
def text_page(request: Request) -> HTMLResponse:
    return _render_text_page(request)


@router.post("/deteksi-teks", response_class=HTMLResponse)
def text_detect(
    request: Request,
    text: str = Form(""),
    analysis_type: str = Form("sentiment"),
) -> HTMLResponse:
    if not text.strip():
        return _render_text_page(
            request, text=text, analysis_type=analysis_type, error="Silakan masukkan teks untuk dianalisis!"
        )
    try:
        result = gemini_service.analyze_text(text, analysis_type)
    except DISPLAYABLE_ERRORS as exc:
        logger.warning("Text analysis failed: %s", exc)
        return _render_text_page(request, text=text, analysis_type=analysis_type, error=str(exc))
    return _render_text_page(request, text=text, analysis_type=analysis_type, result=result)


@router.get("/deteksi-negara", response_class=HTMLResponse)
def country_page(request: Request, q: str = "", selected: str = "") -> HTMLResponse:
    countries = []
    profile = None
    error = None
    if q.strip():
        try:
            countries = countries_service.search_countries(q)
        except IntegrationError as exc:
            logger.warning("Country search for %r failed: %s", q, exc)
            error = str(exc)
    if selected:
        match = next((c for c in countries if c.name.common == selected), None)
        if match is not None:
            profile = countries_service.build_profile(match)
    return templates.TemplateResponse(
        request,
        "country_page.html",
        {"query": q, "countries": countries, "profile": profile, "error": error},
    )
