"""
GPX Parser

Upstream producer of track points: reads a GPX document and returns
ordered (lat, lon, ele) samples. No statistics are computed here.
"""

import logging
from typing import List

import gpxpy
import gpxpy.gpx

from trailtime.errors import EmptyTrackError, GPXParseError
from trailtime.features.route.models import TrackPoint

logger = logging.getLogger(__name__)


class GPXParserService:
    """Service for parsing GPX files."""

    @staticmethod
    def extract_points(content: bytes | str) -> List[TrackPoint]:
        """
        Extract track points from GPX content.

        Track points are preferred; route points are used when the file
        has no tracks. Missing elevation is read as 0.

        Args:
            content: GPX file content

        Returns:
            Ordered list of TrackPoint

        Raises:
            GPXParseError: If the document is not UTF-8 or not valid GPX
            EmptyTrackError: If it contains no points
        """
        try:
            if isinstance(content, bytes):
                content = content.decode('utf-8')
            gpx = gpxpy.parse(content)
        except (UnicodeDecodeError, gpxpy.gpx.GPXException) as e:
            logger.error(f"Failed to parse GPX: {e}")
            raise GPXParseError(f"Invalid GPX file: {e}") from e

        points: List[TrackPoint] = []

        # From tracks
        for track in gpx.tracks:
            for segment in track.segments:
                for point in segment.points:
                    ele = point.elevation if point.elevation else 0.0
                    points.append(TrackPoint(point.latitude, point.longitude, ele))

        # From routes (if no tracks)
        if not points:
            for route in gpx.routes:
                for point in route.points:
                    ele = point.elevation if point.elevation else 0.0
                    points.append(TrackPoint(point.latitude, point.longitude, ele))

        if not points:
            raise EmptyTrackError("GPX file contains no track or route points")

        logger.debug(f"Extracted {len(points)} points from GPX")
        return points
