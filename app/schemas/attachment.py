from pydantic import BaseModel
from typing import List, Literal, Union

class Attachment(BaseModel):
    """Arquivo recebido em um turno de chat. Nunca é persistido."""
    filename: str
    mimetype: str
    size: int
    data: bytes

class TextPart(BaseModel):
    type: Literal["text"] = "text"
    text: str

class ImageUrl(BaseModel):
    url: str

class ImagePart(BaseModel):
    type: Literal["image_url"] = "image_url"
    image_url: ImageUrl

class ExtractedContent(BaseModel):
    """
    Conteúdo do turno do usuário após o processamento dos anexos.

    Sem imagens o conteúdo é apenas texto; com ao menos uma imagem vira
    uma lista de partes (texto + imagens) no formato da API de visão.
    """
    text: str
    images: List[ImagePart] = []

    @property
    def has_images(self) -> bool:
        return bool(self.images)

    def as_message_content(self) -> Union[str, List[dict]]:
        if not self.has_images:
            return self.text
        parts = [TextPart(text=self.text)] + list(self.images)
        return [part.model_dump() for part in parts]
