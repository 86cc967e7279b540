"""Text extraction from uploaded resume bytes"""

import io
from pathlib import Path
import pypdf
import docx

from backend.app.core.logging import get_logger
from backend.app.core.exceptions import ValidationException

logger = get_logger(__name__)


class TextExtractor:
    """Extract text from PDF, DOCX and plain-text uploads held in memory"""

    SUPPORTED_EXTENSIONS = ['.pdf', '.docx', '.txt', '.md']

    @staticmethod
    def validate_filename(filename: str) -> str:
        """
        Check the upload has a supported extension

        Args:
            filename: Original filename of the upload

        Returns:
            Lower-cased extension

        Raises:
            ValidationException: If the extension is not supported
        """
        ext = Path(filename or "").suffix.lower()
        if ext not in TextExtractor.SUPPORTED_EXTENSIONS:
            raise ValidationException(
                f"Unsupported file format: {ext or '(none)'}. Supported formats: {TextExtractor.SUPPORTED_EXTENSIONS}"
            )
        return ext

    @staticmethod
    def extract_from_pdf(content: bytes) -> str:
        """
        Extract text from PDF bytes

        Raises:
            ValidationException: If extraction fails
        """
        try:
            pdf_reader = pypdf.PdfReader(io.BytesIO(content))

            if pdf_reader.is_encrypted:
                raise ValidationException("PDF file is encrypted and cannot be processed")

            text_parts = []
            for page in pdf_reader.pages:
                text = page.extract_text()
                if text:
                    text_parts.append(text)

            return '\n'.join(text_parts)

        except ValidationException:
            raise
        except pypdf.errors.PdfReadError as e:
            logger.error(f"PDF read error: {str(e)}")
            raise ValidationException(f"Failed to read PDF file: {str(e)}")
        except Exception as e:
            logger.error(f"PDF extraction error: {str(e)}")
            raise ValidationException(f"Failed to extract text from PDF: {str(e)}")

    @staticmethod
    def extract_from_docx(content: bytes) -> str:
        """
        Extract text from DOCX bytes, paragraphs first, then table cells

        Raises:
            ValidationException: If extraction fails
        """
        try:
            doc = docx.Document(io.BytesIO(content))

            text_parts = [p.text for p in doc.paragraphs if p.text.strip()]

            for table in doc.tables:
                for row in table.rows:
                    for cell in row.cells:
                        if cell.text.strip():
                            text_parts.append(cell.text)

            return '\n'.join(text_parts)

        except Exception as e:
            logger.error(f"DOCX extraction error: {str(e)}")
            raise ValidationException(f"Failed to extract text from DOCX: {str(e)}")

    @staticmethod
    def extract_from_text(content: bytes) -> str:
        return content.decode("utf-8", errors="replace")

    @classmethod
    def extract_text(cls, content: bytes, filename: str) -> str:
        """
        Extract text from an uploaded resume

        Args:
            content: Raw file bytes
            filename: Original filename, used to pick the extractor

        Returns:
            Extracted text

        Raises:
            ValidationException: If the format is unsupported or extraction fails
        """
        ext = cls.validate_filename(filename)

        if ext == '.pdf':
            text = cls.extract_from_pdf(content)
        elif ext == '.docx':
            text = cls.extract_from_docx(content)
        else:
            text = cls.extract_from_text(content)

        logger.info(f"Extracted {len(text)} characters from {ext} upload")
        return text
