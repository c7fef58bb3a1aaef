from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app import schemas
from app.controllers import user as user_controller
from app.core.database import get_db
from app.core.security import get_current_user
from app.models.user import User

router = APIRouter(
    prefix="/api/auth",
    tags=["auth"]
)

# 🚀 Rota para registrar um novo usuário
@router.post("/register", response_model=schemas.UserRead, status_code=status.HTTP_201_CREATED)
def register(user_create: schemas.UserCreate, db: Session = Depends(get_db)):
    return user_controller.create_user(user_create, db)

# 🔑 Rota para login de usuário
@router.post("/login", response_model=schemas.LoginResponse)
def login(user_login: schemas.UserLogin, db: Session = Depends(get_db)):
    return user_controller.login_user(user_login, db)

# 🚪 Logout: o token é descartado pelo cliente
@router.post("/logout", response_model=schemas.MessageResponse)
def logout():
    return schemas.MessageResponse(message="Logout realizado com sucesso")

# 👤 Rota para obter o usuário autenticado
@router.get("/me", response_model=schemas.UserRead)
def me(current_user: User = Depends(get_current_user)):
    return current_user

# 🔄 Rota para atualizar o perfil do usuário autenticado
@router.put("/me", response_model=schemas.UserRead)
def update_me(
    user_update: schemas.UserUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return user_controller.update_user(current_user, user_update, db)
