import os
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

logger = logging.getLogger(__name__)

HAND_SIZE = int(os.getenv("GOFISH_HAND_SIZE", "5"))
if not 1 <= HAND_SIZE <= 13:
    raise RuntimeError("GOFISH_HAND_SIZE must be between 1 and 13")

# upper bound on computer passes per human round
MAX_COMPUTER_PASSES = int(os.getenv("GOFISH_MAX_COMPUTER_PASSES", "52"))
if MAX_COMPUTER_PASSES < 1:
    raise RuntimeError("GOFISH_MAX_COMPUTER_PASSES must be at least 1")

_seed = os.getenv("GOFISH_SEED")
SEED: Optional[int] = int(_seed) if _seed not in (None, "") else None

DEFAULT_HUMAN = "Human"
DEFAULT_OPPONENTS = ["Computer1", "Computer2", "Computer3"]


@dataclass
class TableConfig:
    human: str = DEFAULT_HUMAN
    opponents: List[str] = field(default_factory=lambda: list(DEFAULT_OPPONENTS))

    @classmethod
    def from_yaml_entry(cls, entry: Dict[str, Any]) -> "TableConfig":
        human = entry.get("human")
        if not isinstance(human, str) or not human:
            raise ValueError("'human' is required and must be a non-empty string")
        opponents = entry.get("opponents") or []
        if not isinstance(opponents, list) or not opponents:
            raise ValueError("'opponents' must be a non-empty list of names")
        for name in opponents:
            if not isinstance(name, str) or not name:
                raise ValueError(f"Invalid opponent name: {name!r}")
        if human in opponents or len(set(opponents)) != len(opponents):
            # duplicates only make the winner text ambiguous
            logger.warning(f"Table has duplicate player names: {human}, {opponents}")
        return cls(human=human, opponents=list(opponents))


def load_table(path: Union[str, Path]) -> TableConfig:
    """Load a table layout (human name plus opponent names) from a YAML file.

    Expected format:

        human: Owen
        opponents:
          - Brittney
          - Ana
    """
    with open(path, "r") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping at the top level")
    return TableConfig.from_yaml_entry(data)
