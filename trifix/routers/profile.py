# File: trifix/routers/profile.py
import logging
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import update
from sqlalchemy.orm import Session
from trifix.db.session import get_db
from trifix.core.security import hash_password
from trifix.models.user import User
from trifix.schemas.auth import MessageOut
from trifix.schemas.user import ProfileOut, ProfileUpdateIn

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/profile", tags=["profile"])

@router.get("/{user_id}", response_model=ProfileOut)
def get_profile(user_id: int, db: Session = Depends(get_db)):
    try:
        u = db.query(User).filter(User.id == user_id).first()
    except Exception as e:
        logger.error(f"Error fetching profile {user_id}: {e}", exc_info=True)
        raise HTTPException(500, "Error al obtener perfil")
    if not u: raise HTTPException(404, "Perfil no encontrado")
    return u

@router.put("/{user_id}", response_model=MessageOut)
def update_profile(user_id: int, body: ProfileUpdateIn, db: Session = Depends(get_db)):
    values = {
        "name": body.name,
        "surname": body.surname,
        "email": body.email,
        "phone": body.phone,
        "location": body.location,
    }
    try:
        if body.new_password:
            values["hashed_password"] = hash_password(body.new_password)
        db.execute(update(User).where(User.id == user_id).values(**values))
        db.commit()
    except Exception as e:
        db.rollback()
        logger.error(f"Error updating profile {user_id}: {e}", exc_info=True)
        raise HTTPException(500, "Error al actualizar perfil")
    return {"message": "Perfil actualizado correctamente"}

@router.delete("/{user_id}", response_model=MessageOut)
def delete_profile(user_id: int, db: Session = Depends(get_db)):
    try:
        db.query(User).filter(User.id == user_id).delete()
        db.commit()
    except Exception as e:
        db.rollback()
        logger.error(f"Error deleting profile {user_id}: {e}", exc_info=True)
        raise HTTPException(500, "Error al eliminar perfil")
    return {"message": "Perfil eliminado correctamente"}
