"""
Analysis Routes

Endpoints for route statistics, time estimates and derived metrics.
"""

from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile

from trailtime.api.v1.deps import get_analysis_service
from trailtime.config import settings
from trailtime.errors import EmptyTrackError, GPXParseError
from trailtime.features.gpx import GPXParserService
from trailtime.features.hiking import FitnessLevel, PaceType, PackWeight
from trailtime.features.route import MAX_SMOOTHING_LEVEL
from trailtime.schemas import AnalyzeRequest, AnalysisResponse, ProfileIn
from trailtime.services import AnalysisService

router = APIRouter()


@router.post("", response_model=AnalysisResponse)
async def analyze_points(
    request: AnalyzeRequest,
    service: AnalysisService = Depends(get_analysis_service),
):
    """
    Analyze an ordered list of track points.

    Returns stats, five time estimates, the smart estimate, difficulty,
    bio metrics and (with start_time) daylight safety.
    """
    points = [p.to_track_point() for p in request.points]

    try:
        result, warnings = await service.analyze(
            points,
            request.to_profile(),
            smoothing_level=request.smoothing_level,
            start_time=request.start_time,
            weather=request.weather.to_snapshot() if request.weather else None,
            fetch_weather=request.fetch_weather,
        )
    except EmptyTrackError as e:
        raise HTTPException(status_code=422, detail=str(e))

    return AnalysisResponse.from_result(result, warnings)


@router.post("/gpx", response_model=AnalysisResponse)
async def analyze_gpx(
    file: UploadFile = File(...),
    fitness: FitnessLevel = Form(FitnessLevel.AVERAGE),
    pace: PaceType = Form(PaceType.STEADY),
    pack_weight: PackWeight = Form(PackWeight.LIGHT),
    include_breaks: bool = Form(True),
    smoothing_level: int = Form(0, ge=0, le=MAX_SMOOTHING_LEVEL),
    start_time: Optional[datetime] = Form(None),
    fetch_weather: bool = Form(False),
    service: AnalysisService = Depends(get_analysis_service),
):
    """Upload a GPX file and analyze it."""
    if not file.filename or not file.filename.lower().endswith('.gpx'):
        raise HTTPException(status_code=400, detail="Only .gpx files are allowed")

    content = await file.read()

    if len(content) == 0:
        raise HTTPException(status_code=400, detail="File is empty")

    if len(content) > settings.max_upload_mb * 1024 * 1024:
        raise HTTPException(
            status_code=400,
            detail=f"File too large (max {settings.max_upload_mb}MB)"
        )

    profile = ProfileIn(
        fitness=fitness,
        pace=pace,
        pack_weight=pack_weight,
        include_breaks=include_breaks,
    ).to_profile()

    try:
        points = GPXParserService.extract_points(content)
        result, warnings = await service.analyze(
            points,
            profile,
            smoothing_level=smoothing_level,
            start_time=start_time,
            fetch_weather=fetch_weather,
        )
    except GPXParseError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except EmptyTrackError as e:
        raise HTTPException(status_code=422, detail=str(e))

    return AnalysisResponse.from_result(result, warnings)
