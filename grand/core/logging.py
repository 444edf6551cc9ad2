"""
grand.core.logging

Seed event logging.

Nothing is logged unless a callback is attached to a RandomSource via
``on_seed=``. Logging the seeds that were drawn from the entropy source
is what makes an unpredictably seeded run replayable.
"""

import json
from pathlib import Path
from typing import Any, Callable, Dict, Union


def create_seed_logger(
    output_dir: Union[str, Path],
    verbose: bool = False,
) -> Callable[[Dict[str, Any]], None]:
    """Create logging callback for seed events.
    
    Args:
        output_dir: Directory to log into. Events are appended as JSON lines
            to ``<output_dir>/logs/seeding.log``.
        verbose: Also print a one-line summary of each event.
    
    Returns:
        Callback accepting an event dict, suitable for ``on_seed=``.
    """
    log_file = Path(output_dir) / "logs" / "seeding.log"
    
    def log(event: Dict[str, Any]):
        if verbose:
            print(f"  Seeded | origin: {event.get('origin', '?'):8s} | "
                  f"seed: {event.get('seed', '?')}")
        
        log_file.parent.mkdir(parents=True, exist_ok=True)
        with open(log_file, "a") as f:
            f.write(json.dumps(event, sort_keys=True) + "\n")
    
    return log
