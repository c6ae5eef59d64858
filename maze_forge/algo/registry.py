import random
from dataclasses import replace
from typing import Dict, FrozenSet, NamedTuple, Optional, Type

from maze_forge.algo.aldous_broder import AldousBroder
from maze_forge.algo.base import Generator
from maze_forge.algo.binary_tree import BinaryTree
from maze_forge.algo.dfs import RecursiveBacktracker
from maze_forge.algo.division import RecursiveDivision
from maze_forge.algo.eller import EllersAlgorithm
from maze_forge.algo.hunt_kill import HuntAndKill
from maze_forge.algo.kruskal import KruskalsAlgorithm
from maze_forge.algo.prim import PrimsAlgorithm
from maze_forge.algo.sidewinder import Sidewinder
from maze_forge.algo.wilson import WilsonsAlgorithm
from maze_forge.core.config import GenerationConfig
from maze_forge.core.errors import UnknownAlgorithm
from maze_forge.core.grid import Grid


class AlgorithmInfo(NamedTuple):
    display_name: str
    complexity_class: str
    description: str


# Insertion order is the order algorithms are listed to users
ALGORITHMS: Dict[str, Type[Generator]] = {
    cls.key: cls for cls in (
        RecursiveBacktracker,
        PrimsAlgorithm,
        HuntAndKill,
        WilsonsAlgorithm,
        EllersAlgorithm,
        Sidewinder,
        BinaryTree,
        KruskalsAlgorithm,
        AldousBroder,
        RecursiveDivision,
    )
}


def _lookup(algorithm_id: str) -> Type[Generator]:
    try:
        return ALGORITHMS[algorithm_id]
    except (KeyError, TypeError):
        raise UnknownAlgorithm(algorithm_id) from None


def create(algorithm_id: str, width: int, height: int, cell_size: int = 20,
           seed: Optional[int] = None, rng: Optional[random.Random] = None,
           config: Optional[GenerationConfig] = None) -> Generator:
    """
    Builds a fresh grid and binds it to the requested strategy.
    cell_size is carried in the config for renderers only. A passed config
    supplies the algorithm tunables, the explicit arguments win for the rest.
    """
    cls = _lookup(algorithm_id)
    if config is None:
        config = GenerationConfig(width=width, height=height, cell_size=cell_size, seed=seed)
    else:
        config = replace(config, width=width, height=height, cell_size=cell_size, seed=seed)
    grid = Grid(width, height)
    return cls(grid, seed=seed, rng=rng, config=config)


def describe(algorithm_id: str) -> AlgorithmInfo:
    cls = _lookup(algorithm_id)
    return AlgorithmInfo(cls.name, cls.complexity, cls.description)


def list_algorithms() -> FrozenSet[str]:
    return frozenset(ALGORITHMS)


def pick_random(rng: Optional[random.Random] = None) -> str:
    rng = rng if rng is not None else random
    return rng.choice(list(ALGORITHMS))
