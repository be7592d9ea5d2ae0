"""
Analysis Schemas

Pydantic models for analysis requests and responses.
Rounding happens here and nowhere upstream.
"""

from datetime import date, datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from trailtime.features.hiking import FitnessLevel, PaceType, PackWeight, HikerProfile
from trailtime.features.route import MAX_SMOOTHING_LEVEL, TrackPoint
from trailtime.features.weather import WeatherSnapshot
from trailtime.services.pipeline import AnalysisResult
from trailtime.shared.formatters import format_duration, round_half_up


# === Request Models ===

class PointIn(BaseModel):
    """One track sample."""
    lat: float
    lon: float
    ele: float = 0.0

    def to_track_point(self) -> TrackPoint:
        return TrackPoint(lat=self.lat, lon=self.lon, ele=self.ele)


class ProfileIn(BaseModel):
    """Hiker options shared by JSON and upload endpoints."""
    fitness: FitnessLevel = FitnessLevel.AVERAGE
    pace: PaceType = PaceType.STEADY
    pack_weight: PackWeight = PackWeight.LIGHT
    include_breaks: bool = True

    def to_profile(self) -> HikerProfile:
        return HikerProfile(
            fitness=self.fitness,
            pace=self.pace,
            pack_weight=self.pack_weight,
            include_breaks=self.include_breaks,
        )


class WeatherSchema(BaseModel):
    """Forecast for one day."""
    date: date
    max_temp: float
    min_temp: float
    feels_like_max: float
    precipitation_mm: float = 0.0
    precipitation_probability_pct: float = 0.0
    wind_speed_kph: float = 0.0
    wind_gusts_kph: float = 0.0
    weather_code: int = 0
    description: Optional[str] = None
    pressure_hpa: float = 1013
    cloud_cover_pct: float = 0
    humidity_pct: float = 50
    uv_index: float = 0.0
    sunrise: Optional[datetime] = None
    sunset: Optional[datetime] = None

    @classmethod
    def from_snapshot(cls, snapshot: WeatherSnapshot) -> "WeatherSchema":
        return cls(
            date=snapshot.date,
            max_temp=snapshot.max_temp,
            min_temp=snapshot.min_temp,
            feels_like_max=snapshot.feels_like_max,
            precipitation_mm=snapshot.precipitation_mm,
            precipitation_probability_pct=snapshot.precipitation_probability_pct,
            wind_speed_kph=snapshot.wind_speed_kph,
            wind_gusts_kph=snapshot.wind_gusts_kph,
            weather_code=snapshot.weather_code,
            description=snapshot.description,
            pressure_hpa=snapshot.pressure_hpa,
            cloud_cover_pct=snapshot.cloud_cover_pct,
            humidity_pct=snapshot.humidity_pct,
            uv_index=snapshot.uv_index,
            sunrise=snapshot.sunrise,
            sunset=snapshot.sunset,
        )

    def to_snapshot(self) -> WeatherSnapshot:
        return WeatherSnapshot(
            date=self.date,
            max_temp=self.max_temp,
            min_temp=self.min_temp,
            feels_like_max=self.feels_like_max,
            precipitation_mm=self.precipitation_mm,
            precipitation_probability_pct=self.precipitation_probability_pct,
            wind_speed_kph=self.wind_speed_kph,
            wind_gusts_kph=self.wind_gusts_kph,
            weather_code=self.weather_code,
            pressure_hpa=self.pressure_hpa,
            cloud_cover_pct=self.cloud_cover_pct,
            humidity_pct=self.humidity_pct,
            uv_index=self.uv_index,
            sunrise=self.sunrise,
            sunset=self.sunset,
        )


class AnalyzeRequest(ProfileIn):
    """Request for a full route analysis."""
    points: List[PointIn] = Field(..., description="Ordered track points")
    smoothing_level: int = Field(default=0, ge=0, le=MAX_SMOOTHING_LEVEL)
    start_time: Optional[datetime] = None
    weather: Optional[WeatherSchema] = None
    # Fetch a forecast for the first point on start_time's date
    fetch_weather: bool = False


# === Response Models ===

class ProfilePoint(BaseModel):
    """Point of the elevation profile."""
    lat: float
    lon: float
    ele: float
    dist_from_start: float
    slope: float


class RouteStatsSchema(BaseModel):
    total_distance_km: float
    elevation_gain_m: float
    elevation_loss_m: float
    max_elevation_m: float
    min_elevation_m: float
    avg_slope_percent: float
    slope_breakdown_km: Dict[str, float]
    points_count: int


class TimeEstimationSchema(BaseModel):
    method: str
    time_minutes: int
    formatted: str
    description: str


class SmartAggregateSchema(BaseModel):
    value_minutes: int
    formatted: str
    method: str
    reason: str


class DifficultySchema(BaseModel):
    score: float
    level: str
    label: str
    description: str
    color: str
    terrain_tags: str
    equivalent_flat_km: float


class BioMetricsSchema(BaseModel):
    calories_kcal: int
    water_liters: float


class SafetySchema(BaseModel):
    finish_time: datetime
    sunset_time: Optional[datetime] = None
    is_night_hiking: bool


class AnalysisResponse(BaseModel):
    """Response for a route analysis."""
    stats: RouteStatsSchema
    smoothing_level: int
    profile_points: List[ProfilePoint]
    smoothed_slope_breakdown_km: Dict[str, float]
    estimations: List[TimeEstimationSchema]
    smart_estimate: SmartAggregateSchema
    difficulty: DifficultySchema
    bio: BioMetricsSchema
    safety: Optional[SafetySchema] = None
    weather: Optional[WeatherSchema] = None
    warnings: List[str] = []

    @classmethod
    def from_result(
        cls,
        result: AnalysisResult,
        warnings: Optional[List[str]] = None
    ) -> "AnalysisResponse":
        stats = result.stats
        smart = result.smart
        difficulty = result.difficulty

        return cls(
            stats=RouteStatsSchema(
                total_distance_km=round(stats.total_distance, 2),
                elevation_gain_m=round(stats.elevation_gain),
                elevation_loss_m=round(stats.elevation_loss),
                max_elevation_m=round(stats.max_elevation),
                min_elevation_m=round(stats.min_elevation),
                avg_slope_percent=round(stats.avg_slope, 1),
                slope_breakdown_km={
                    band: round(km, 2) for band, km in stats.slope_breakdown.items()
                },
                points_count=len(stats.points),
            ),
            smoothing_level=result.smoothing_level,
            profile_points=[
                ProfilePoint(
                    lat=p.lat,
                    lon=p.lon,
                    ele=round(p.ele, 1),
                    dist_from_start=round(p.dist_from_start, 3),
                    slope=round(p.slope, 1),
                )
                for p in result.smoothed_points
            ],
            smoothed_slope_breakdown_km={
                band: round(km, 2) for band, km in result.smoothed_breakdown.items()
            },
            estimations=[
                TimeEstimationSchema(
                    method=e.method,
                    time_minutes=e.time_minutes,
                    formatted=format_duration(e.time_minutes),
                    description=e.description,
                )
                for e in result.estimations
            ],
            smart_estimate=SmartAggregateSchema(
                value_minutes=round_half_up(smart.value),
                formatted=format_duration(smart.value),
                method=smart.method.value,
                reason=smart.reason,
            ),
            difficulty=DifficultySchema(
                score=round(difficulty.score, 1),
                level=difficulty.level.value,
                label=difficulty.label,
                description=difficulty.description,
                color=difficulty.color,
                terrain_tags=difficulty.terrain_tags,
                equivalent_flat_km=round(difficulty.equivalent_flat_km, 1),
            ),
            bio=BioMetricsSchema(
                calories_kcal=result.bio.calories,
                water_liters=result.bio.water,
            ),
            safety=SafetySchema(
                finish_time=result.safety.finish_time,
                sunset_time=result.safety.sunset_time,
                is_night_hiking=result.safety.is_night_hiking,
            ) if result.safety else None,
            weather=WeatherSchema.from_snapshot(result.weather) if result.weather else None,
            warnings=warnings or [],
        )
