"""
TrailTime: GPX route analytics and hiking time estimation.

Usage:
    from trailtime.services import compute
    from trailtime.features.hiking import HikerProfile
"""

__version__ = "0.1.0"
