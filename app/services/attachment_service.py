"""
Processamento dos anexos de um turno de chat.

Cada arquivo vira um fragmento de texto anexado à mensagem do usuário ou,
no caso de imagens, uma parte ``image_url`` com um data URI em base64.
Falhas em um arquivo nunca interrompem o processamento dos demais.
"""

import base64
import logging
import os
import subprocess
import tempfile
from typing import Iterable, List, Optional

from app.core.config import settings
from app.schemas.attachment import Attachment, ExtractedContent, ImagePart, ImageUrl

logger = logging.getLogger(__name__)

# Tamanho mínimo (exclusivo) do texto extraído de um PDF para ser considerado útil
MIN_PDF_TEXT_LENGTH = 10


def format_size(size: int) -> str:
    return f"{size / 1024:.1f} KB"


class PdfExtractionError(Exception):
    """A ferramenta externa de extração falhou ou não pôde ser executada."""


class AttachmentService:

    def __init__(self, pdftotext_path: Optional[str] = None, temp_dir: Optional[str] = None):
        self.pdftotext_path = pdftotext_path or settings.PDFTOTEXT_PATH
        self.temp_dir = temp_dir or settings.TEMP_DIR or None

    def extract(self, message: str, attachments: Iterable[Attachment]) -> ExtractedContent:
        """Monta o conteúdo do turno: texto original + anotações de cada anexo."""
        text = message
        images: List[ImagePart] = []

        for attachment in attachments:
            try:
                if attachment.mimetype.startswith("image/"):
                    images.append(self.image_part(attachment))
                    text += f"\n[Imagem anexada: {attachment.filename}]"
                elif self.is_text(attachment):
                    text += self.text_block(attachment)
                elif attachment.mimetype == "application/pdf":
                    text += self.pdf_block(attachment)
                else:
                    text += f"\n[Documento anexado: {attachment.filename} ({format_size(attachment.size)})]"
            except Exception:
                logger.exception(f"❌ Erro ao processar anexo {attachment.filename}")
                text += f"\n[Documento anexado: {attachment.filename} ({format_size(attachment.size)})]"

        return ExtractedContent(text=text, images=images)

    @staticmethod
    def is_text(attachment: Attachment) -> bool:
        return attachment.mimetype.startswith("text/") or attachment.filename.lower().endswith(".txt")

    @staticmethod
    def image_part(attachment: Attachment) -> ImagePart:
        encoded = base64.b64encode(attachment.data).decode("ascii")
        return ImagePart(image_url=ImageUrl(url=f"data:{attachment.mimetype};base64,{encoded}"))

    @staticmethod
    def text_block(attachment: Attachment) -> str:
        content = attachment.data.decode("utf-8", errors="replace")
        return f"\n\n[Conteúdo do arquivo {attachment.filename}]:\n{content}"

    def pdf_block(self, attachment: Attachment) -> str:
        size = format_size(attachment.size)
        try:
            extracted = self.extract_pdf_text(attachment.data)
        except PdfExtractionError as e:
            logger.warning(f"⚠️ Falha ao extrair texto do PDF {attachment.filename}: {e}")
            return f"\n[PDF anexado: {attachment.filename} ({size}) - Texto não pôde ser extraído]"
        except OSError as e:
            logger.error(f"❌ Erro de arquivo temporário para o PDF {attachment.filename}: {e}")
            return f"\n[PDF anexado: {attachment.filename} ({size})]"

        if extracted and len(extracted) > MIN_PDF_TEXT_LENGTH:
            logger.info(f"📄 Texto extraído do PDF {attachment.filename}: {len(extracted)} caracteres")
            return f"\n\n[Conteúdo extraído do PDF {attachment.filename}]:\n{extracted}"
        return f"\n[PDF anexado: {attachment.filename} ({size}) - Texto não pôde ser extraído]"

    def extract_pdf_text(self, data: bytes) -> str:
        """
        Grava o PDF em um arquivo temporário e executa ``pdftotext <arquivo> -``.

        O arquivo temporário é removido em qualquer caminho de saída.
        """
        tmp_fd, tmp_path = tempfile.mkstemp(suffix=".pdf", prefix="chat_", dir=self.temp_dir)
        try:
            with os.fdopen(tmp_fd, "wb") as buffer:
                buffer.write(data)
            try:
                result = subprocess.run(
                    [self.pdftotext_path, tmp_path, "-"],
                    capture_output=True,
                    check=True,
                )
            except subprocess.CalledProcessError as e:
                raise PdfExtractionError(f"exit code {e.returncode}") from e
            except FileNotFoundError as e:
                raise PdfExtractionError(f"{self.pdftotext_path} não encontrado") from e
            return result.stdout.decode("utf-8", errors="replace").strip()
        finally:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
