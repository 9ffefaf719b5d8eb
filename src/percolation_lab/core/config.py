"""Configuration management for percolation-lab."""

from pydantic import BaseModel, Field, field_validator

from percolation_lab.stats import CONFIDENCE_95
from percolation_lab.unionfind.base import UnionFind
from percolation_lab.unionfind.registry import DEFAULT_STRATEGY, get_strategy


class SimulationConfig(BaseModel):
    """Configuration for percolation experiments."""

    grid_size: int = Field(default=20, gt=0, description="Grid dimension n")
    trials: int = Field(default=30, ge=1, description="Number of Monte Carlo trials")
    strategy: str = Field(default=DEFAULT_STRATEGY, description="Union-Find strategy name")
    seed: int | None = Field(default=None, description="Random seed for reproducible runs")
    confidence_z: float = Field(
        default=CONFIDENCE_95, gt=0, description="z-score for the confidence interval"
    )

    @field_validator("strategy")
    @classmethod
    def check_strategy(cls, value: str) -> str:
        get_strategy(value)
        return value

    def strategy_class(self) -> type[UnionFind]:
        """Resolve the configured strategy name to its class."""
        return get_strategy(self.strategy)
