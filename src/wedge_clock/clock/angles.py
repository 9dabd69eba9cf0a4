"""Clock hand angles."""

from datetime import datetime, time
from typing import NamedTuple, Tuple, Union

# Degrees of sweep per unit of time: 360 / 60 = 6 and 360 / 12 = 30
DEGREES_PER_MINUTE = 6.0
DEGREES_PER_HOUR = 30.0


class HandAngles(NamedTuple):
    """Hour and minute hand angles, degrees clockwise from 12 o'clock."""

    hour: float
    minute: float


def hand_angles(hour: int, minute: int, second: int = 0) -> HandAngles:
    """
    Compute hand angles for a wall-clock time.

    The minute hand creeps 0.1 degree per second and the hour hand creeps by a
    twelfth of the minute hand's angle, so neither jumps on the minute or hour.

    Args:
        hour: Hour (any value, taken modulo 12)
        minute: Minute 0-59
        second: Second 0-59

    Returns:
        HandAngles
    """
    minute_angle = minute * DEGREES_PER_MINUTE + second / 10
    hour_angle = (hour % 12) * DEGREES_PER_HOUR + minute_angle / 12
    return HandAngles(hour=hour_angle, minute=minute_angle)


def hand_angles_for(moment: Union[datetime, time]) -> HandAngles:
    """Compute hand angles for a datetime or time, ignoring sub-second parts."""
    return hand_angles(moment.hour, moment.minute, moment.second)


def wrap_sector(hour_angle: float, minute_angle: float) -> Tuple[float, float]:
    """
    Turn hand angles into a clockwise sector from hour hand to minute hand.

    When the minute hand is numerically behind the hour hand a full turn is
    added to it, so the sector always runs the literal clockwise way round.
    """
    end = minute_angle
    if hour_angle > minute_angle:
        end += 360
    return hour_angle, end
