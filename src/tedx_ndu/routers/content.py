"""Public, read-only event content"""

from fastapi import APIRouter, Depends

from tedx_ndu.models.schemas import ProgramItemRead, ProgramSession, Speaker, Sponsor
from tedx_ndu.services.content_service import ContentService, get_content_service

router = APIRouter(prefix="/api", tags=["Content"])


@router.get("/speakers", response_model=list[Speaker])
async def list_speakers(content: ContentService = Depends(get_content_service)):
    return content.list_speakers()


@router.get("/program/sessions", response_model=list[ProgramSession])
async def list_program_sessions(
    content: ContentService = Depends(get_content_service),
):
    return content.list_program_sessions()


@router.get("/program/items", response_model=list[ProgramItemRead])
async def list_program_items(content: ContentService = Depends(get_content_service)):
    """Program items with the speaker object embedded (null for breaks)"""
    return content.list_program_items()


@router.get("/sponsors", response_model=list[Sponsor])
async def list_sponsors(content: ContentService = Depends(get_content_service)):
    return content.list_sponsors()
