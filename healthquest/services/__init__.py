# healthquest/services/__init__.py
from .challenge_service import (
    apply_challenge_progress,
    generate_daily_challenges,
    get_user_challenges,
    get_user_level,
)
from .records_service import log_activity, log_daily_steps, log_hydration, log_sleep
from .stats_service import (
    get_activity_stats,
    get_activity_trends,
    get_hydration_stats,
    get_hydration_trends,
    get_sleep_quality_trends,
    get_sleep_stats,
    get_sleep_trends,
    get_steps_trends,
)
