"""Domain features: route geometry, hiking estimates, metrics, weather, GPX input."""
