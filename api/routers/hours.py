"""Planetary hour API endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Body, HTTPException, Query
from pydantic import BaseModel, Field
from typing import Optional, Dict, Any, Literal

from ..schemas.hours_viewmodel import AlignmentVM, DivineTimingViewModel
from ..services.alignment import align
from ..services.guidance import PURPOSES
from ..services.orchestrators.divine_timing import build_viewmodel
from ..i18n.resolve import quality_label


router = APIRouter(prefix="/v1/hours", tags=["hours"])

ElementName = Literal["fire", "water", "air", "earth"]


class HoursPlace(BaseModel):
    lat: Optional[float] = None
    lon: Optional[float] = None
    tz: Optional[str] = None
    city: Optional[str] = None
    is_accurate: bool = True


class HoursOptions(BaseModel):
    lang: str = Field(default="en")
    purpose: Optional[str] = None


class HoursRequest(BaseModel):
    date: Optional[str] = None
    place: Optional[HoursPlace] = None
    element: ElementName
    options: HoursOptions = Field(default_factory=HoursOptions)


def _build(
    date: Optional[str], place: Optional[Dict[str, Any]], element: str, options: Dict[str, Any]
) -> DivineTimingViewModel:
    purpose = options.get("purpose")
    if purpose and purpose not in PURPOSES:
        raise HTTPException(status_code=422, detail=f"Unknown purpose: {purpose}")
    try:
        return build_viewmodel(date, place, element, options)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc


@router.post(
    "/compute",
    response_model=DivineTimingViewModel,
    summary="Compute planetary hours and alignment for a date and location",
)
def hours_compute(
    req: HoursRequest = Body(
        ...,
        examples=[
            {
                "date": "2024-06-05",
                "place": {"lat": 21.4225, "lon": 39.8262, "tz": "Asia/Riyadh", "city": "Mecca"},
                "element": "fire",
                "options": {"lang": "en", "purpose": "work"},
            }
        ],
    ),
) -> DivineTimingViewModel:
    place = req.place.model_dump(exclude_none=True) if req.place else None
    return _build(req.date, place, req.element, req.options.model_dump())


@router.get(
    "/today",
    response_model=DivineTimingViewModel,
    summary="Planetary hours for the current moment",
)
def hours_today(
    element: ElementName = Query(..., description="User element"),
    lat: Optional[float] = Query(None, description="Latitude"),
    lon: Optional[float] = Query(None, description="Longitude"),
    tz: Optional[str] = Query(None, description="IANA timezone"),
    city: Optional[str] = Query(None, description="Optional place label"),
    lang: str = Query("en", description="Language code"),
    purpose: Optional[str] = Query(None, description="Optional purpose for guidance"),
) -> DivineTimingViewModel:
    place_payload: Dict[str, Any] = {}
    if lat is not None:
        place_payload["lat"] = lat
    if lon is not None:
        place_payload["lon"] = lon
    if tz is not None:
        place_payload["tz"] = tz
    if city:
        place_payload["city"] = city
    return _build(None, place_payload or None, element, {"lang": lang, "purpose": purpose})


@router.get("/alignment", response_model=AlignmentVM, summary="Alignment between two elements")
def hours_alignment(
    user_element: ElementName = Query(...),
    hour_element: ElementName = Query(...),
    lang: str = Query("en"),
) -> AlignmentVM:
    result = align(user_element, hour_element)
    return AlignmentVM(
        user_element=result.user_element,
        hour_element=result.hour_element,
        relation=result.relation,
        quality=result.quality,
        quality_label=quality_label(result.quality, lang),
        harmony_score=result.harmony_score,
    )
