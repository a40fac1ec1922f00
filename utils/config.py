import logging

from models.annealing import DEFAULT_TEMPERATURE
from models.montecarlo import DEFAULT_MAX_TRIES, RepairStrategy
from models.result import Algorithm
from models.sudoku_solver import SudokuSolver

log = logging.getLogger(__name__)

DEFAULT_ALGORITHM = Algorithm.BACKTRACING.value
DEFAULT_REPAIR = RepairStrategy.PEERS.value


class SolverConfig:
    """Settings of one command line run"""

    def __init__(self, input_file, algorithm=DEFAULT_ALGORITHM, max_tries=DEFAULT_MAX_TRIES,
                 seed=None, repair=DEFAULT_REPAIR, temperature=DEFAULT_TEMPERATURE,
                 show_unsolved=False, save_image=None):
        if max_tries < 1:
            raise ValueError(f"max_tries must be positive, received {max_tries}")
        if temperature <= 0:
            raise ValueError(f"temperature must be positive, received {temperature}")
        self.input_file = input_file
        self.algorithm = Algorithm.from_name(algorithm)
        self.max_tries = max_tries
        self.seed = seed
        self.repair = RepairStrategy(repair)
        self.temperature = temperature
        self.show_unsolved = show_unsolved
        self.save_image = save_image

    @classmethod
    def from_args(cls, args):
        """Build the configuration from parsed command line arguments"""
        config = cls(
            input_file=args.input,
            algorithm=args.algorithm,
            max_tries=args.max_tries,
            seed=args.seed,
            repair=args.repair,
            temperature=args.temperature,
            show_unsolved=args.show_unsolved,
            save_image=args.save_image,
        )
        log.info("Using input file: %s", config.input_file)
        log.info("Using algorithm: %s", config.algorithm.value)
        if config.algorithm is not Algorithm.BACKTRACING:
            log.info("Using maximum number of tries: %d", config.max_tries)
        if config.algorithm is Algorithm.MONTECARLO:
            log.info("Using repair strategy: %s", config.repair.value)
        if config.algorithm is Algorithm.ANNEALING:
            log.info("Using temperature: %s", config.temperature)
        return config

    def create_solver(self):
        return SudokuSolver(self.algorithm, max_tries=self.max_tries, seed=self.seed,
                            repair=self.repair, temperature=self.temperature)
