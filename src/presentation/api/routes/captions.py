"""
Rotas de legendas.
Proxy com cache para as transcrições do YouTube.
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, Path, Query, Request, status
from loguru import logger

from src.application.use_cases import GetCaptionsUseCase
from src.application.dtos import CaptionCueDTO, ErrorResponseDTO
from src.presentation.api.dependencies import get_captions_use_case


router = APIRouter(prefix="/captions", tags=["Captions"])


ERROR_RESPONSES = {
    400: {"description": "Missing or invalid video ID", "model": ErrorResponseDTO},
    404: {"description": "Video has no captions (cached as failure for 5 minutes)", "model": ErrorResponseDTO},
    429: {"description": "Rate limit exceeded or recent failure for this video", "model": ErrorResponseDTO},
    500: {"description": "Unexpected upstream or internal failure", "model": ErrorResponseDTO}
}


@router.get(
    "/{video_id}",
    response_model=List[CaptionCueDTO],
    status_code=status.HTTP_200_OK,
    summary="Get YouTube captions",
    description="""
    Returns the caption cues of a YouTube video, in upstream order.

    Successful results are cached for 24 hours. Videos without captions are
    cached as failures for 5 minutes; requests for them get 429 with
    `retryAfter=300` until the entry expires.
    """,
    responses=ERROR_RESPONSES
)
async def get_captions(
    request: Request,
    video_id: str = Path(..., description="YouTube video ID"),
    lang: Optional[str] = Query(
        None,
        max_length=16,
        description="Caption track language (defaults to the service default language)"
    ),
    use_case: GetCaptionsUseCase = Depends(get_captions_use_case)
) -> List[CaptionCueDTO]:
    """
    Obtém as legendas de um vídeo do YouTube.

    - **video_id**: ID de 11 caracteres do vídeo
    - **lang**: Código do idioma da faixa (opcional)
    """
    request_id = getattr(request.state, "request_id", "unknown")
    logger.info(f"[{request_id}] Captions request: video={video_id} lang={lang or 'default'}")

    cues = await use_case.execute(video_id, lang)

    return [CaptionCueDTO(**cue.to_dict()) for cue in cues]


@router.get("", include_in_schema=False)
@router.get("/", include_in_schema=False)
async def get_captions_without_id(
    use_case: GetCaptionsUseCase = Depends(get_captions_use_case)
):
    """Requisição sem ID: o use case rejeita com ValidationError (400)."""
    return await use_case.execute(None)
