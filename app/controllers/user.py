import logging
from sqlalchemy.orm import Session
from sqlalchemy.sql import func
from fastapi import HTTPException

from app.models.user import User
from app.schemas.user import UserCreate, UserLogin, UserUpdate, UserRead, LoginResponse
from app.core.security import hash_password, verify_password, create_jwt_token
from app.core.config import settings

logger = logging.getLogger(__name__)

# 🚀 Função para registrar um novo usuário
def create_user(user_create: UserCreate, db: Session) -> UserRead:
    existing_user = db.query(User).filter(User.email == user_create.email).first()
    if existing_user:
        raise HTTPException(status_code=400, detail="Email já está em uso")
    new_user = User(
        email=user_create.email,
        password=hash_password(user_create.password),
        name=user_create.name,
        rank=user_create.rank,
        unit=user_create.unit,
        is_active=True,
    )
    db.add(new_user)
    db.commit()
    db.refresh(new_user)
    return UserRead.model_validate(new_user)

# 🔑 Função para login de usuário
def login_user(user_login: UserLogin, db: Session) -> LoginResponse:
    if not user_login.email or not user_login.password:
        raise HTTPException(status_code=400, detail="Email and password are required")
    db_user = db.query(User).filter(User.email == user_login.email.strip().lower()).first()
    if not db_user or not verify_password(user_login.password, db_user.password):
        raise HTTPException(status_code=401, detail="Invalid email or password")
    if not db_user.is_active:
        raise HTTPException(status_code=401, detail="Account disabled")
    token = create_jwt_token(user_id=db_user.id)
    return LoginResponse(
        user=UserRead.model_validate(db_user),
        token=token,
        message="Login successful",
    )

# 🔄 Função para atualizar o perfil do usuário autenticado
def update_user(db_user: User, user_update: UserUpdate, db: Session) -> UserRead:
    if user_update.password:
        db_user.password = hash_password(user_update.password)
    if user_update.name:
        db_user.name = user_update.name.strip()
    if user_update.rank is not None:
        db_user.rank = user_update.rank
    if user_update.unit is not None:
        db_user.unit = user_update.unit
    db_user.updated_at = func.current_timestamp()
    db.commit()
    db.refresh(db_user)
    return UserRead.model_validate(db_user)

# 🔑 Função para criar usuário admin
def create_admin_user(db: Session):
    if not settings.ADMIN_EMAIL or not settings.ADMIN_PASSWORD:
        logger.info("ADMIN_EMAIL e ADMIN_PASSWORD não definidos no .env, admin não criado")
        return
    admin_email = settings.ADMIN_EMAIL.strip().lower()
    db_user = db.query(User).filter(User.email == admin_email).first()
    if not db_user:
        user_create = UserCreate(
            email=admin_email,
            password=settings.ADMIN_PASSWORD,
            name=settings.ADMIN_NAME,
        )
        create_user(user_create, db)
        logger.info(f"Admin user created with email: {admin_email} ✅")
    else:
        logger.info(f"Admin user with email {admin_email} already exists. ⚠️")
