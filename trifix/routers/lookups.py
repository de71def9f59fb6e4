# File: trifix/routers/lookups.py
from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from trifix.db.session import get_db
from trifix.models.lookup import Region, Municipality, Neighborhood
from trifix.schemas.publication import LookupOut

router = APIRouter(tags=["lookups"])

@router.get("/regions", response_model=List[LookupOut])
def list_regions(db: Session = Depends(get_db)):
    return db.query(Region).order_by(Region.name).all()

@router.get("/regions/{region_id}/municipalities", response_model=List[LookupOut])
def list_municipalities(region_id: int, db: Session = Depends(get_db)):
    return db.query(Municipality).filter(Municipality.region_id == region_id).order_by(Municipality.name).all()

@router.get("/municipalities/{municipality_id}/neighborhoods", response_model=List[LookupOut])
def list_neighborhoods(municipality_id: int, db: Session = Depends(get_db)):
    return (
        db.query(Neighborhood)
        .filter(Neighborhood.municipality_id == municipality_id)
        .order_by(Neighborhood.name)
        .all()
    )
