from enum import Enum


class Algorithm(Enum):
    BACKTRACING = "backtracing"
    MONTECARLO = "montecarlo"
    ANNEALING = "annealing"

    @classmethod
    def from_name(cls, name):
        """Look up an algorithm by its command line name"""
        if isinstance(name, cls):
            return name
        normalized = str(name).strip().lower()
        if normalized == "backtracking":
            return cls.BACKTRACING
        try:
            return cls(normalized)
        except ValueError:
            choices = ", ".join(a.value for a in cls)
            raise ValueError(f"Unknown algorithm '{name}'. Choose one of: {choices}") from None


class SolveStatus(Enum):
    SOLVED = "solved"
    UNSOLVABLE = "unsolvable"
    BUDGET_EXHAUSTED = "budget_exhausted"
    CONTRADICTORY = "contradictory"


class SolveResult:
    """Outcome of a single solve run.

    Only a SOLVED result carries a grid. Every other status reports why the
    run stopped, how many tries it took and, for contradictory puzzles, which
    given cells clash.
    """

    def __init__(self, status, tries, algorithm, grid=None, conflicts=()):
        if status is SolveStatus.SOLVED and grid is None:
            raise ValueError("a solved result needs a grid")
        if status is not SolveStatus.SOLVED and grid is not None:
            raise ValueError(f"a {status.value} result must not carry a grid")
        self.status = status
        self.tries = tries
        self.algorithm = algorithm
        self.grid = grid
        self.conflicts = list(conflicts)

    @property
    def solved(self):
        return self.status is SolveStatus.SOLVED

    def __repr__(self):
        return (f"SolveResult(status={self.status.value!r}, tries={self.tries}, "
                f"algorithm={self.algorithm.value!r})")
