"""WMO weather interpretation codes (simplified for display)."""


def describe_weather_code(code: int) -> str:
    """
    Map a WMO weather code to a short description.

    Args:
        code: WMO code as returned by Open-Meteo

    Returns:
        Description such as 'Partly Cloudy'; 'Unknown' for unmapped codes
    """
    if code == 0:
        return "Clear Sky"
    if code == 1:
        return "Mainly Clear"
    if code == 2:
        return "Partly Cloudy"
    if code == 3:
        return "Overcast"
    if code in (45, 48):
        return "Foggy"
    if 51 <= code <= 55:
        return "Drizzle"
    if 56 <= code <= 57:
        return "Freezing Drizzle"
    if code == 61:
        return "Slight Rain"
    if code == 63:
        return "Moderate Rain"
    if code == 65:
        return "Heavy Rain"
    if 66 <= code <= 67:
        return "Freezing Rain"
    if 71 <= code <= 77:
        return "Snow"
    if 80 <= code <= 82:
        return "Rain Showers"
    if 85 <= code <= 86:
        return "Snow Showers"
    if code >= 95:
        return "Thunderstorm"
    return "Unknown"
