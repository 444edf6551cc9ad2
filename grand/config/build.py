"""
grand.config.build

Construct a RandomSource from configuration.
"""

from ..core.entropy import get_entropy_source
from ..core.logging import create_seed_logger
from ..core.rng import RandomSource
from .schema import GrandConfig


def build_random_source(config: GrandConfig) -> RandomSource:
    """Create a RandomSource as described by config.
    
    With no configured seed the source is left pending and draws from the
    configured entropy source on first use.
    """
    on_seed = None
    if config.logging.log_dir is not None:
        on_seed = create_seed_logger(config.logging.log_dir, verbose=config.logging.verbose)
    
    return RandomSource(
        config.seeding.seed,
        entropy_source=get_entropy_source(config.seeding.entropy_source),
        on_seed=on_seed,
    )
