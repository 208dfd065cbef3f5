from .trajectory import Trajectory, TrajectorySample
from .sampler import sample, sample_at, sample_count, time_steps
from .evaluator import HitOutcome, HitResult, euclidean_distance, evaluate
from .simulation import BasketShot, ShotResult
