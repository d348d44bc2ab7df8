from .log import logger, setup_logger
from .sample import global_rng, sample_indices, set_seed, shuffle_, uniform_index
