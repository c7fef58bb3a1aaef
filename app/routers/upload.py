from fastapi import APIRouter, File, HTTPException, UploadFile
from typing import Optional

router = APIRouter(
    prefix="/api",
    tags=["upload"]
)

# 📤 Rota para upload simples: devolve o conteúdo do arquivo como texto
@router.post("/upload")
async def upload_file(file: Optional[UploadFile] = File(None)):
    if file is None or not file.filename:
        raise HTTPException(status_code=400, detail="No file uploaded")
    content = (await file.read()).decode("utf-8", errors="replace")
    return {"content": content}
