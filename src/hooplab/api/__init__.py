from .scenario import SAMPLING_PRESETS, Scenario
