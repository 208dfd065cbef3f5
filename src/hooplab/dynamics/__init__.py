from .launch import GRAVITY, LaunchParameters, Target
from .kinematics import (
    apex_height,
    horizontal_range,
    ms_to_kmh,
    position_at,
    required_speed,
    time_of_flight,
    time_to_apex,
)
