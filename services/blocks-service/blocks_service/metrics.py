from prometheus_client import Counter

TRAINING_BLOCKS_CREATED_TOTAL = Counter(
    "training_blocks_created_total",
    "Number of training blocks created via blocks-service",
)

WORKOUTS_LOGGED_TOTAL = Counter(
    "blocks_workouts_logged_total",
    "Number of workouts logged against training blocks",
)

ACTUAL_SETS_LOGGED_TOTAL = Counter(
    "blocks_actual_sets_logged_total",
    "Number of actual sets recorded via blocks-service",
)

WORKOUTS_DELETED_TOTAL = Counter(
    "blocks_workouts_deleted_total",
    "Number of logged workouts deleted via blocks-service",
)

BLOCK_CACHE_HITS_TOTAL = Counter(
    "blocks_cache_hits_total",
    "Number of Redis cache hits in blocks-service",
)

BLOCK_CACHE_MISSES_TOTAL = Counter(
    "blocks_cache_misses_total",
    "Number of Redis cache misses in blocks-service",
)

BLOCK_CACHE_ERRORS_TOTAL = Counter(
    "blocks_cache_errors_total",
    "Number of Redis cache errors in blocks-service",
)
