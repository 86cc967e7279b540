"""Resume API endpoints"""

from typing import Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile

from backend.app.core.dependencies import get_resume_service
from backend.app.core.exceptions import ReRankException, ValidationException
from backend.app.core.logging import get_logger
from backend.app.schemas.resume import ResumeRatingResponse, ResumeUploadResponse
from backend.app.services.resume_service import ResumeService

logger = get_logger(__name__)

router = APIRouter()

DEFAULT_FILENAME = "resume"


@router.post("/rate", response_model=ResumeRatingResponse)
async def rate_resume(
    resume: Optional[UploadFile] = File(None, description="Resume file (PDF, DOCX, TXT or MD)"),
    resume_service: ResumeService = Depends(get_resume_service)
):
    """
    Rate a resume without creating a candidate profile

    **Returns:**
    - Identifier of the stored resume
    - Skills, certifications, experience and industry scores plus the overall score
    - Skills recognised in the document
    - Suggestions for improving the score

    **Errors:**
    - 400 if no file is attached
    - 413 if the file is larger than 10MB
    """
    if resume is None:
        raise ValidationException("No file uploaded")

    logger.info(f"Resume rating request: {resume.filename}")

    try:
        content = await resume.read()
        return resume_service.rate_resume(content, resume.filename or DEFAULT_FILENAME)

    except ReRankException:
        raise
    except Exception as e:
        logger.error(f"Resume rating failed: {str(e)}", exc_info=True)
        raise ReRankException("Failed to process resume", status_code=500)


@router.post("/upload", response_model=ResumeUploadResponse)
async def upload_resume(
    resume: Optional[UploadFile] = File(None, description="Resume file (PDF, DOCX, TXT or MD)"),
    name: Optional[str] = Form(None),
    email: Optional[str] = Form(None),
    location: Optional[str] = Form(None),
    title: Optional[str] = Form(None),
    bio: Optional[str] = Form(None),
    resume_service: ResumeService = Depends(get_resume_service)
):
    """
    Upload a resume and create a candidate profile

    The response ``score`` is the upload estimate; the stored candidate's
    overall score is computed with the standard formula and may differ.

    **Errors:**
    - 400 if the file, name or email is missing
    - 413 if the file is larger than 10MB
    """
    if resume is None:
        raise ValidationException("No file uploaded")
    if not name or not email:
        raise ValidationException("Name and email are required")

    logger.info(f"Resume upload request: {resume.filename}")

    try:
        content = await resume.read()
        return resume_service.upload_resume(
            content,
            resume.filename or DEFAULT_FILENAME,
            name=name,
            email=email,
            location=location or "",
            title=title or "",
        )

    except ReRankException:
        raise
    except Exception as e:
        logger.error(f"Resume upload failed: {str(e)}", exc_info=True)
        raise ReRankException("Failed to upload resume", status_code=500)
