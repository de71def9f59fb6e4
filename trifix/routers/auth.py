# File: trifix/routers/auth.py

import logging
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from trifix.db.session import get_db
from trifix.models.user import User
from trifix.schemas.auth import RegisterIn, LoginIn, LoginOut, MessageOut
from trifix.core.security import hash_password, verify_password, make_token

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])

@router.post("/register", response_model=MessageOut)
def register(body: RegisterIn, db: Session = Depends(get_db)):
    # a duplicate email fails on the unique index and gets the same generic error
    try:
        user = User(
            name=body.name,
            surname=body.surname,
            email=body.email,
            phone=body.phone,
            location=body.location,
            hashed_password=hash_password(body.password),
        )
        db.add(user)
        db.commit()
    except Exception as e:
        db.rollback()
        logger.error(f"Failed to register user: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Error al registrar usuario")
    return {"message": "Usuario registrado correctamente"}

@router.post("/login", response_model=LoginOut)
def login(body: LoginIn, db: Session = Depends(get_db)):
    try:
        user = db.query(User).filter(User.email == body.email).first()
    except Exception as e:
        logger.error(f"Login query failed: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Error en login")
    if not user:
        raise HTTPException(status_code=401, detail="Usuario no encontrado")

    try:
        ok = verify_password(body.password, user.hashed_password)
    except Exception as e:
        logger.error(f"Password check failed for user {user.id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Error en login")
    if not ok:
        logger.info("Rejected password for user %s", user.id)
        raise HTTPException(status_code=401, detail="Contraseña incorrecta")

    return {"message": "Login exitoso", "token": make_token(user.id)}
