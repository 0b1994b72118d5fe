"""
Fast marching configuration classes.

Configurations specify HOW a distance map is computed (margin, limit policy,
validation), not WHAT is computed (cost field and seeds are passed to the
engine directly).
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator


class FastMarchingConfig(BaseModel):
    """
    Fast marching engine configuration.

    Attributes
    ----------
    limit : float | None
        Distance limit carried by the engine (default: None, meaning no limit).
        Advisory unless ``stop_at_limit`` is set.
    margin : int
        Width of the border band whose cells are never visited (default: 1)
    stop_at_limit : bool
        Stop the main loop once the smallest trial distance exceeds ``limit``
        (default: False)
    validate_cost : bool
        Raise NonPositiveCostError instead of dividing by a cost <= 0
        (default: True)
    progress_interval : int
        Log progress every ``progress_interval`` frozen cells; 0 disables
        (default: 0)
    """

    model_config = ConfigDict(extra="forbid")

    limit: float | None = Field(default=None, gt=0)
    margin: int = Field(default=1, ge=0)
    stop_at_limit: bool = False
    validate_cost: bool = True
    progress_interval: int = Field(default=0, ge=0)

    @model_validator(mode="after")
    def validate_limit_policy(self) -> FastMarchingConfig:
        """A limit must be given when it is enforced."""
        if self.stop_at_limit and self.limit is None:
            raise ValueError("stop_at_limit=True requires a finite limit")
        return self
