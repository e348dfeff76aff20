# healthquest/core/calories.py
"""
Calories burned per activity session:

    calories = MET * weight_kg * hours   (x0.9 for female users)

MET values from the Compendium of Physical Activities.
"""

DEFAULT_MET = 4.0
FEMALE_FACTOR = 0.9

MET_VALUES = {
    "running": 9.8,
    "walking": 3.5,
    "cycling": 7.5,
    "swimming": 7.0,
    "hiking": 6.0,
    "yoga": 2.5,
    "pilates": 3.0,
    "strength_training": 5.0,
    "climbing": 8.0,
    "hiit": 8.0,
    "crossfit": 7.0,
    "spinning": 8.5,
    "dance": 4.8,
    "boxing": 7.5,
    "kickboxing": 8.0,
    "racket": 7.0,
    "football": 7.0,
    "triathlon": 10.0,
    "aerobics": 6.5,
    "badminton": 5.5,
    "baseball": 5.0,
    "basketball": 6.5,
    "biking": 7.5,
    "biking_stationary": 7.0,
    "boot_camp": 8.0,
    "calisthenics": 4.0,
    "cricket": 5.0,
    "dancing": 4.8,
    "elliptical": 5.0,
    "fencing": 6.0,
    "football_american": 8.0,
    "frisbee_disc": 3.0,
    "golf": 4.5,
    "guided_breathing": 1.0,
    "gymnastics": 3.8,
    "handball": 8.0,
    "high_intensity_interval_training": 8.0,
    "ice_hockey": 8.0,
    "ice_skating": 5.5,
    "martial_arts": 6.5,
    "paddling": 5.0,
    "paragliding": 1.5,
    "racquetball": 7.0,
    "rock_climbing": 8.0,
    "roller_hockey": 7.5,
    "rowing": 7.0,
    "rowing_machine": 7.0,
    "rugby": 8.3,
    "running_treadmill": 9.0,
    "sailing": 3.0,
    "scuba_diving": 7.0,
    "skating": 7.0,
    "skiing": 7.0,
    "snowboarding": 5.3,
    "snowshoeing": 5.3,
    "soccer": 7.0,
    "softball": 5.0,
    "squash": 7.3,
    "stair_climbing": 9.0,
    "stair_climbing_machine": 9.0,
    "stretching": 2.3,
    "surfing": 3.5,
    "swimming_open_water": 7.0,
    "swimming_pool": 6.0,
    "table_tennis": 4.0,
    "tennis": 7.3,
    "volleyball": 4.0,
    "water_polo": 10.0,
    "weightlifting": 6.0,
    "wheelchair": 2.5,
}


def met_value(activity_kind) -> float:
    key = (activity_kind or "").strip().lower()
    return MET_VALUES.get(key, DEFAULT_MET)


def calories_burned(activity_kind, duration_minutes, weight_kg, gender=None) -> float:
    if weight_kg is None:
        return 0.0

    hours = float(duration_minutes or 0) / 60.0
    calories = met_value(activity_kind) * float(weight_kg) * hours
    if gender == "female":
        calories *= FEMALE_FACTOR

    return round(calories, 1)
