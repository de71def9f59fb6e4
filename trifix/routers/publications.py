# File: trifix/routers/publications.py
import logging
from collections import defaultdict
from fastapi import APIRouter, Depends, HTTPException, UploadFile, File, Form
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from typing import List, Optional
from trifix.db.session import get_db
from trifix.models.publication import Publication
from trifix.models.attachment import Attachment
from trifix.models.lookup import Region, Municipality, Neighborhood
from trifix.models.user import User
from trifix.schemas.publication import PublicationCreatedOut, PublicationOut
from trifix.services.storage import save_upload

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/publications", tags=["publications"])


def save_attachments(db: Session, publication_id: int, paths: list[str]) -> int:
    """Inserts one attachment row per stored file, each in its own transaction.

    Returns how many rows were saved. A failed insert is rolled back and logged
    and does not stop the remaining ones.
    """
    saved = 0
    for path in paths:
        try:
            db.add(Attachment(publication_id=publication_id, file_url=path))
            db.commit()
            saved += 1
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(
                f"Failed to save attachment {path!r} for publication {publication_id}: {e}",
                exc_info=True,
            )
    if saved < len(paths):
        logger.warning(
            "Publication %s: %s of %s attachments saved", publication_id, saved, len(paths)
        )
    return saved


@router.post("", response_model=PublicationCreatedOut)
def create_publication(
    author_id: int = Form(..., alias="authorId"),
    title: str = Form(...),
    description: str = Form(""),
    priority: str = Form(""),
    region_id: Optional[int] = Form(None, alias="regionId"),
    municipality_id: Optional[int] = Form(None, alias="municipalityId"),
    neighborhood_id: Optional[int] = Form(None, alias="neighborhoodId"),
    files: List[UploadFile] | None = File(default=None),
    db: Session = Depends(get_db),
):
    # files hit the disk before the row exists
    try:
        paths = [save_upload(f) for f in files or []]
    except OSError as e:
        logger.error(f"Error storing uploaded files: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Error al guardar publicación")

    obj = Publication(
        author_id=author_id,
        title=title,
        description=description,
        priority=priority,
        region_id=region_id,
        municipality_id=municipality_id,
        neighborhood_id=neighborhood_id,
    )
    try:
        db.add(obj)
        db.commit()
        db.refresh(obj)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error saving publication: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Error al guardar publicación")

    saved = save_attachments(db, obj.id, paths)
    return {
        "message": "Publicación creada correctamente",
        "attachments_saved": saved,
        "attachments_total": len(paths),
    }


@router.get("", response_model=List[PublicationOut])
def list_publications(db: Session = Depends(get_db)):
    try:
        rows = (
            db.query(
                Publication,
                User.name.label("author"),
                Region.name.label("region"),
                Municipality.name.label("municipality"),
                Neighborhood.name.label("neighborhood"),
            )
            .outerjoin(User, Publication.author_id == User.id)
            .outerjoin(Region, Publication.region_id == Region.id)
            .outerjoin(Municipality, Publication.municipality_id == Municipality.id)
            .outerjoin(Neighborhood, Publication.neighborhood_id == Neighborhood.id)
            .order_by(Publication.created_at.desc(), Publication.id.desc())
            .all()
        )
        photos = defaultdict(list)
        ids = [r[0].id for r in rows]
        if ids:
            q = db.query(Attachment).filter(Attachment.publication_id.in_(ids)).order_by(Attachment.id)
            for a in q:
                photos[a.publication_id].append(a.file_url)
    except SQLAlchemyError as e:
        logger.error(f"Error listing publications: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Error al obtener publicaciones")

    return [
        {
            "id": p.id,
            "title": p.title,
            "description": p.description,
            "priority": p.priority,
            "created_at": p.created_at,
            "author": author,
            "region": region,
            "municipality": municipality,
            "neighborhood": neighborhood,
            "attachments": photos[p.id],
        }
        for p, author, region, municipality, neighborhood in rows
    ]
